"""
6502 Processor Variant Definitions
==================================

Defines the processor variants the core can be configured for.

Supported variants:
- NES: Ricoh 2A03, the console derivative (default). Programs load at the
  start of cartridge PRG space, $8000.
- MOS6502: Stock MOS 6502. Programs load at $0600, above the zero page,
  stack page and the conventional $0200-$05FF work area.

Both variants run binary ADC/SBC. The Decimal flag is kept in the status
register but never changes arithmetic.

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CPUModel:
    """
    Configuration for a processor variant.

    Attributes:
        name: Human-readable variant name
        model_type: Short code used by get_model() and the CLI
        rom_origin: Address where load() places program bytes
        description: One-line description
    """
    name: str
    model_type: str
    rom_origin: int
    description: str

    def __str__(self) -> str:
        return self.name


# =============================================================================
# Predefined Variants
# =============================================================================

NES_ROM_ORIGIN = 0x8000
MOS6502_ROM_ORIGIN = 0x0600

MODEL_NES = CPUModel(
    name="Ricoh 2A03 (NES)",
    model_type="NES",
    rom_origin=NES_ROM_ORIGIN,
    description="Console variant, programs load at PRG ROM start",
)

MODEL_MOS6502 = CPUModel(
    name="MOS 6502",
    model_type="MOS6502",
    rom_origin=MOS6502_ROM_ORIGIN,
    description="Stock processor, programs load above the work area",
)

MODEL_DEFAULT = MODEL_NES

_MODEL_MAP = {
    "NES": MODEL_NES,
    "MOS6502": MODEL_MOS6502,
}


# =============================================================================
# Model Selection Functions
# =============================================================================

def get_model(model_code: str) -> CPUModel:
    """
    Get variant configuration by code.

    Supported codes:
    - "NES" (also "2A03", "NES2A03"): console variant
    - "MOS6502" (also "6502", "MOS"): stock processor

    Args:
        model_code: Variant code string (case-insensitive)

    Returns:
        CPUModel configuration

    Raises:
        ValueError: If the code is not recognized
    """
    code = model_code.upper().strip()

    if code in _MODEL_MAP:
        return _MODEL_MAP[code]

    if code in ("2A03", "NES2A03", "RP2A03"):
        return MODEL_NES
    if code in ("6502", "MOS"):
        return MODEL_MOS6502
    if code in ("DEFAULT", ""):
        return MODEL_DEFAULT

    available = ", ".join(sorted(_MODEL_MAP.keys()))
    raise ValueError(
        f"Unknown model code '{model_code}'. Available: {available}"
    )


def list_models() -> list[CPUModel]:
    """Get list of all predefined variants."""
    return [MODEL_NES, MODEL_MOS6502]

#
# Engnote Bands, Prefixes and Units of Measurement
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from enum import IntEnum, StrEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import FrozenBiMap
from .formatters import fmt_type, fmt_value
from .numeric import std_int


# @formatter:off

MIN_EXPONENT = -24
MAX_EXPONENT = 24

# Band index of the unit band: index = exponent // 3 + UNIT_INDEX
UNIT_INDEX = 8
MAX_INDEX = 16

band_codes = FrozenBiMap(
    {
        -24: "y", -21: "z", -18: "a", -15: "f", -12: "p", -9: "n", -6: "µ", -3: "m",
        0: "",
        3: "k", 6: "M", 9: "G", 12: "T", 15: "P", 18: "E", 21: "Z", 24: "Y",
    },
    aliases={"u": -6, "μ": -6, " ": 0},
)

valid_exponents = tuple(band_codes.keys())
valid_codes = tuple(band_codes.values())
valid_indexes = tuple(range(MAX_INDEX + 1))
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

class BandRangeError(ValueError):
    """A band index, exponent or code is outside the supported 10⁻²⁴..10²⁴ window."""


# @formatter:off
@unique
class Prefix(IntEnum):
    """
    Named Engineering Notation levels, valued by their power of ten.

    Attributes:
        YOTTA (int) : 10²⁴,  index 16, code 'Y'
        KILO (int)  : 10³,   index 9,  code 'k'
        UNIT (int)  : 10⁰,   index 8,  no code
        MICRO (int) : 10⁻⁶,  index 6,  code 'µ'
        YOCTO (int) : 10⁻²⁴, index 0,  code 'y'
    """
    YOTTA =  24
    ZETTA =  21
    EXA   =  18
    PETA  =  15
    TERA  =  12
    GIGA  =   9
    MEGA  =   6
    KILO  =   3
    UNIT  =   0
    MILLI =  -3
    MICRO =  -6
    NANO  =  -9
    PICO  = -12
    FEMTO = -15
    ATTO  = -18
    ZEPTO = -21
    YOCTO = -24
# @formatter:on

    @property
    def index(self) -> int:
        """Band index in [0, 16]."""
        return band_index(self.value)

    @property
    def code(self) -> str:
        """Band code, empty for UNIT."""
        return band_codes[self.value]

    @classmethod
    def from_index(cls, index: int) -> "Prefix":
        return cls(band_exponent(index))

    @classmethod
    def from_code(cls, code: str) -> "Prefix":
        return cls(code_exponent(code))


@unique
class Unit(StrEnum):
    """Electronic unit abbreviations."""
    AMPERE = "A"
    VOLT = "V"
    OHM = "Ω"
    HERTZ = "Hz"
    FARAD = "F"
    HENRY = "H"
    WATT = "W"
    RELUCTANCE = "R"


@unique
class Symbol(StrEnum):
    """Symbols commonly printed next to engineering values."""
    ABOUT = "≈"
    NOT_EQUAL = "≠"
    ALPHA = "α"
    BETA = "β"
    DELTA = "δ"
    PI = "π"
    TAU = "τ"
    THETA = "θ"
    PHI = "Φ"
    LAMBDA = "λ"
    DEGREE = "°"


# Conversion factors ---------------------------------------------------------------------------------------------------

RAD_TO_DEG = 180 / math.pi
DEG_TO_RAD = math.pi / 180
RAD_TO_GRAD = 200 / math.pi
GRAD_TO_RAD = math.pi / 200


# Methods --------------------------------------------------------------------------------------------------------------

def band_code(exponent: int) -> str:
    """
    Band code for the band containing a power of ten.

    The band of an exponent is its nearest multiple of three not above it, so
    band_code(-4) and band_code(-6) both give 'µ'.

    Returns:
        The code, or "" when exponent is outside [-24, 24]. The unit band code is "" as well,
        use band_index() where the two must be told apart.
        Exponents 25 and 26 are outside as well, although a formatted number such as 1e26 shows
        in the Y band as "100Y".

    Examples:
        >>> band_code(-9)
        'n'
        >>> band_code(27)
        ''
    """
    exponent = std_int(exponent, "exponent")
    if not MIN_EXPONENT <= exponent <= MAX_EXPONENT:
        return ""
    return band_codes[_floor3(exponent)]


def band_index(exponent: int) -> int:
    """
    Band index (0..16) of the band containing a power of ten.

    Raises:
        BandRangeError: If exponent is outside [-24, 24].
    """
    exponent = std_int(exponent, "exponent")
    if not MIN_EXPONENT <= exponent <= MAX_EXPONENT:
        raise BandRangeError(
            f"exponent must be in [{MIN_EXPONENT}, {MAX_EXPONENT}], got {fmt_value(exponent)}"
        )
    return exponent // 3 + UNIT_INDEX


def band_exponent(index: int) -> int:
    """
    Power of ten of a band index, index * 3 - 24.

    Raises:
        BandRangeError: If index is outside [0, 16].

    Examples:
        >>> band_exponent(5)
        -9
    """
    index = std_int(index, "index")
    if index not in valid_indexes:
        raise BandRangeError(f"band index must be in [0, {MAX_INDEX}], got {fmt_value(index)}")
    return (index - UNIT_INDEX) * 3


def code_exponent(code: str) -> int:
    """
    Power of ten of a band code. Accepts 'u' for micro and ' ' for the unit band.

    Raises:
        TypeError: If code is not a str.
        BandRangeError: If code is not a known band code.

    Examples:
        >>> code_exponent("k")
        3
        >>> code_exponent("u")
        -6
    """
    if not isinstance(code, str):
        raise TypeError(f"band code must be a str, got {fmt_type(code)}")
    if not band_codes.has_value(code):
        raise BandRangeError(f"unknown band code {fmt_value(code)}, expected one of {valid_codes}")
    return band_codes.get_key(code)


# Private Methods ------------------------------------------------------------------------------------------------------

def _floor3(exponent: int) -> int:
    return (exponent // 3) * 3


# Module Sanity Checks -------------------------------------------------------------------------------------------------

if any(exp != band_exponent(band_index(exp)) for exp in valid_exponents):
    raise AssertionError(
        "Configuration Error: band exponents and band indexes are out of sync."
    )

"""
Engineering Notation formatting and parsing.

Engineering Notation is scientific notation with the exponent restricted to multiples of three.
Each band from 10⁻²⁴ to 10²⁴ is named by a metric prefix code ("n", "k", "M", ...), outside that
window the band is written as an explicit exponent ("e+27"). Three significant digits are
displayed and the decimal point moves so the digits read naturally with their band:

    1.23e-8  -> "12.3n"
    632500.0 -> "633k"
    1.23e+29 -> "123e+27"

The unit band has no code and no separator, 12.0 formats as "12.0".
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re
import warnings
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value
from .numeric import decimal_parts, round3, std_float, std_int
from .units import (
    MAX_INDEX,
    UNIT_INDEX,
    Prefix,
    band_codes,
    band_exponent,
    code_exponent,
)

# Decimal point placement by exponent residue (exponent - band exponent)
_POINT_PATTERNS = (
    "{0}.{1}{2}",  # residue 0: 1.23k
    "{0}{1}.{2}",  # residue 1: 12.3k
    "{0}{1}{2}",  # residue 2: 123k
)

# Scaling beyond these exponents gives inf or 0.0 for any 7-digit mantissa
_MAX_SCALE = 400

_NUMBER_RE = re.compile(
    r"""
    ^\s*
    (?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)
    \s*
    (?P<code>[yzafpnuµμmkMGTPEZY]?)
    \s*$
    """,
    re.VERBOSE,
)


# Classes --------------------------------------------------------------------------------------------------------------

class NotationError(ValueError):
    """Text is not a valid Engineering Notation number."""


@dataclass(frozen=True)
class EnOptions:
    """
    Rendering options for Engineering Notation strings.

    Attributes:
        micro (str)    : Code displayed for the 10⁻⁶ band, "µ" by default or "u" for ASCII output.
        separator (str): Separator between the number and a unit of measurement in EnNumber.

    Examples:
        >>> EnOptions.ascii().micro
        'u'
    """
    micro: str = "µ"
    separator: str = " "

    def __post_init__(self):
        if not isinstance(self.micro, str) or not self.micro:
            raise ValueError(f"micro must be a non-empty str, got {fmt_value(self.micro)}")
        if not isinstance(self.separator, str):
            raise TypeError(f"separator must be a str, got {fmt_type(self.separator)}")

    @classmethod
    def ascii(cls) -> Self:
        """ASCII-only codes, 'u' for micro."""
        return cls(micro="u")

    @classmethod
    def compact(cls) -> Self:
        """No separator between number and unit, e.g. 4.7kΩ."""
        return cls(separator="")

    def code(self, exponent: int) -> str:
        """Displayed code of a band exponent from the band table."""
        if exponent == Prefix.MICRO:
            return self.micro
        return band_codes[exponent]


DEFAULT_OPTIONS = EnOptions()


@dataclass(frozen=True)
class Band:
    """Band code found in the band table."""
    code: str


@dataclass(frozen=True)
class OutOfRange:
    """Band outside the 10⁻²⁴..10²⁴ table, written as a literal exponent suffix like 'e+27'."""
    literal: str


@dataclass(frozen=True)
class EnParts:
    """
    Engineering Notation components of a number.

    Attributes:
        mantissa (str)           : Displayed three-digit mantissa with sign, e.g. "-12.3"
        exponent (int)           : Band exponent, a multiple of three
        index (int)              : Band index exponent // 3 + 8, outside [0, 16] when out of range
        band (Band | OutOfRange) : Table code or literal exponent suffix

    Example:
        parse(2.3456e07) gives EnParts(mantissa='23.5', exponent=6, index=10, band=Band(code='M'))
        and str() of it is "23.5M".
    """
    mantissa: str
    exponent: int
    index: int
    band: Band | OutOfRange

    def __str__(self):
        return f"{self.mantissa}{self.suffix}"

    @property
    def in_range(self) -> bool:
        return isinstance(self.band, Band)

    @property
    def code(self) -> str:
        """Band code, "" for the unit band and for out of range bands."""
        return self.band.code if isinstance(self.band, Band) else ""

    @property
    def suffix(self) -> str:
        """Text following the mantissa, the band code or the literal exponent."""
        return self.band.code if isinstance(self.band, Band) else self.band.literal

    @property
    def value(self) -> float:
        """
        The displayed number as a float, e.g. 23500000.0 for "23.5M".

        Rounding up near the float maximum can display a number above it, "180e+306" reads back
        as inf with a RuntimeWarning.
        """
        result = float(Decimal(self.mantissa).scaleb(self.exponent))
        if math.isinf(result):
            warnings.warn(f"{self} overflows to {result}", RuntimeWarning, stacklevel=2)
        return result


@dataclass(frozen=True)
class EnNumber:
    """
    A number with an optional unit of measurement displayed in Engineering Notation.

    The band code is joined to the unit, the separator goes between number and unit:

        EnNumber(6.325e-07, "V")  -> "633 nV"
        EnNumber(12.5, "V")       -> "12.5 V"
        EnNumber(6.325e-07)       -> "633n"

    For most use cases with band-scaled input, prefer the factory class methods:
    - EnNumber.from_band() for a mantissa in a band given by index
    - EnNumber.from_string() for user-entered text like "4.7 kΩ"
    """

    value: int | float
    unit: str | None = None
    options: EnOptions = field(default=DEFAULT_OPTIONS, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "value", std_float(self.value))
        if self.unit is not None and not isinstance(self.unit, str):
            raise TypeError(f"unit must be a str or None, got {fmt_type(self.unit)}")
        if self.options is None:
            object.__setattr__(self, "options", DEFAULT_OPTIONS)

    @classmethod
    def from_band(
            cls,
            mantissa: int | float,
            index: int,
            unit: str | None = None,
            *,
            options: EnOptions | None = None,
    ) -> Self:
        """Create from a mantissa in the band with the given index, e.g. (4.7, 9, "Ω") for 4.7 kΩ."""
        return cls(from_band(mantissa, index), unit=unit, options=options)

    @classmethod
    def from_string(
            cls,
            text: str,
            unit: str | None = None,
            *,
            options: EnOptions | None = None,
    ) -> Self:
        """Create from text like "4.7 kΩ", unit is stripped from the text if given."""
        return cls(from_string(text, unit=unit), unit=unit, options=options)

    def __str__(self):
        return self.as_str

    @property
    def as_str(self) -> str:
        """Number with band code and unit as a string."""
        parts = self.parts
        if not self.unit:
            return str(parts)
        if parts.in_range:
            return f"{parts.mantissa}{self.options.separator}{parts.suffix}{self.unit}"
        return f"{parts}{self.options.separator}{self.unit}"

    @property
    def parts(self) -> EnParts:
        return parse(self.value, options=self.options)

    @property
    def mantissa(self) -> str:
        return self.parts.mantissa

    @property
    def exponent(self) -> int:
        return self.parts.exponent

    @property
    def code(self) -> str:
        return self.parts.code


# Methods --------------------------------------------------------------------------------------------------------------

def to_engineering(value, options: EnOptions | None = None) -> str:
    """
    Format a number in Engineering Notation rounded to three significant digits.

    Examples:
        >>> to_engineering(2.3456e07)
        '23.5M'
        >>> to_engineering(-632500.0)
        '-633k'
        >>> to_engineering(1.23e-26)
        '12.3e-27'
    """
    return str(parse(value, options=options))


def parse(value, options: EnOptions | None = None) -> EnParts:
    """
    Split a number into its Engineering Notation components.

    Rounds to three significant digits half-up, then places the decimal point by the
    residue of the exponent so the band exponent is a multiple of three. Bands outside
    10⁻²⁴..10²⁴ are returned as OutOfRange with the literal exponent suffix.

    Raises:
        TypeError: If value is not a real number.
        ValueError: If value is NaN or infinite.

    Examples:
        >>> parse(6.325e-07)
        EnParts(mantissa='633', exponent=-9, index=5, band=Band(code='n'))
        >>> parse(1.5e27).band
        OutOfRange(literal='e+27')
    """
    rounded = round3(value)
    return _layout(rounded.digits, rounded.exponent, negative=rounded.sign < 0, options=options)


def band_layout(exponent: int, options: EnOptions | None = None) -> tuple[str, str]:
    """
    Decimal point pattern and band suffix of the number 123 × 10^exponent.

    Shows where the point and the band land for a given power of ten, the pattern is one
    of "1.23", "12.3" or "123".

    Examples:
        >>> band_layout(-4)
        ('12.3', 'm')
        >>> band_layout(Prefix.NANO - 1)
        ('12.3', 'n')
        >>> band_layout(30)
        ('123', 'e+30')
    """
    exponent = std_int(exponent, "exponent")
    parts = _layout("123", exponent + 2, negative=False, options=options)
    return parts.mantissa, parts.suffix


def from_exponent(mantissa, exponent: int) -> float:
    """
    Scale a mantissa by a power of ten, e.g. from_exponent(1.23456, Prefix.KILO) gives 1234.56.

    The mantissa is any finite number, it is normalized to seven significant digits
    before scaling. There is no range restriction on the exponent: a result beyond the
    float range is inf or 0.0 and issues a RuntimeWarning.

    Examples:
        >>> from_exponent(632.5, Prefix.NANO)
        6.325e-07
        >>> from_exponent(-632.5, 3)
        -632500.0
    """
    exponent = std_int(exponent, "exponent")
    sign, digits, mant_exp = decimal_parts(mantissa)

    scale = max(-_MAX_SCALE, min(_MAX_SCALE, mant_exp + exponent))
    result = math.copysign(float(digits.scaleb(scale)), sign)

    if digits and math.isinf(result):
        warnings.warn(
            f"{fmt_value(mantissa)} × 10^{exponent} overflows to {result}",
            RuntimeWarning,
            stacklevel=2,
        )
    elif digits and result == 0:
        warnings.warn(
            f"{fmt_value(mantissa)} × 10^{exponent} underflows to {result}",
            RuntimeWarning,
            stacklevel=2,
        )
    return result


def from_band(mantissa, index: int) -> float:
    """
    Scale a mantissa into the band with the given index (0..16).

    Raises:
        BandRangeError: If index is outside [0, 16].

    Examples:
        >>> from_band(632.5, Prefix.NANO.index)
        6.325e-07
    """
    return from_exponent(mantissa, band_exponent(index))


def from_code(mantissa, code: str) -> float:
    """
    Scale a mantissa into the band with the given code, 'u' is accepted for micro.

    Raises:
        BandRangeError: If code is not a known band code.

    Examples:
        >>> from_code(4.7, "k")
        4700.0
    """
    return from_exponent(mantissa, code_exponent(code))


def from_string(text: str, unit: str | None = None) -> float:
    """
    Read a number written in Engineering Notation, like "632.5 n" or "4.7kΩ".

    Accepts an optional band code after the number, with or without whitespace, and
    plain or exponent notation for the number itself ("15", "1.23e+27"). If unit is
    given, the text must end with it and it is stripped first.

    Raises:
        TypeError: If text is not a str.
        NotationError: If text is malformed, ends with another unit, or is above the float range.

    Text below the smallest float reads as 0.0 and issues a RuntimeWarning, as from_exponent() does.

    Examples:
        >>> from_string("632.5 n")
        6.325e-07
        >>> from_string("4.7 kΩ", unit="Ω")
        4700.0
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {fmt_type(text)}")

    number_text = text.strip()
    if unit:
        if not number_text.endswith(unit):
            raise NotationError(f"expected unit {unit!r} at the end of {fmt_value(text)}")
        number_text = number_text[:-len(unit)]

    match = _NUMBER_RE.match(number_text)
    if match is None:
        raise NotationError(f"not an Engineering Notation number: {fmt_value(text)}")

    exponent = code_exponent(match["code"]) if match["code"] else 0
    try:
        number = Decimal(match["number"])
        result = float(number.scaleb(exponent))
    except ArithmeticError as e:
        raise NotationError(f"number out of range: {fmt_value(text)}") from e

    if math.isinf(result):
        raise NotationError(f"number out of float range: {fmt_value(text)}")
    if number and result == 0:
        warnings.warn(f"{fmt_value(text)} underflows to {result}", RuntimeWarning, stacklevel=2)
    return result


# Private Methods ------------------------------------------------------------------------------------------------------

def _layout(digits: str, exponent: int, *, negative: bool, options: EnOptions | None) -> EnParts:
    """Place the point in three digits d.dd × 10^exponent and pick the band."""
    options = options or DEFAULT_OPTIONS

    # Floor division keeps the residue in {0, 1, 2} for negative exponents too
    band_exp = (exponent // 3) * 3
    mantissa = _POINT_PATTERNS[exponent - band_exp].format(*digits)
    if negative:
        mantissa = f"-{mantissa}"

    index = band_exp // 3 + UNIT_INDEX
    if 0 <= index <= MAX_INDEX:
        band = Band(options.code(band_exp))
    else:
        band = OutOfRange(f"e{band_exp:+d}")
    return EnParts(mantissa=mantissa, exponent=band_exp, index=index, band=band)

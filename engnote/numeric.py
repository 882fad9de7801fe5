"""
Decompose and round floats for Engineering Notation.

A float is split into a sign, a decimal mantissa in [1, 10) and an integer power of ten,
the same split printf-style "%e" formatting produces. The mantissa keeps seven significant
digits, one before the point and six after, so binary noise such as 0.1 + 0.2 never leaks
into the digits used for display.

Rounding to the three displayed significant digits is half-up on the fourth digit, done in
decimal arithmetic on that seven-digit mantissa.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP
from typing import NamedTuple, Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value

# Significant digits kept by decompose(), as in "%e"
MANTISSA_DIGITS = 7

# Significant digits displayed in Engineering Notation
SIG_DIGITS = 3

_TEN = Decimal(10)


# Classes --------------------------------------------------------------------------------------------------------------

@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


class Decomposed(NamedTuple):
    """
    A float as sign × mantissa × 10^exponent.

    Attributes:
        sign (int)      : +1 or -1, negative zero keeps -1
        mantissa (float): Magnitude in [1, 10), or 0.0 for zero
        exponent (int)  : Power of ten, 0 for zero
    """
    sign: int
    mantissa: float
    exponent: int

    @property
    def signed_mantissa(self) -> float:
        return math.copysign(self.mantissa, self.sign)


class Rounded(NamedTuple):
    """
    A float rounded to three significant digits.

    Attributes:
        sign (int)    : +1 or -1
        digits (str)  : The three significant digits, e.g. "633"
        exponent (int): Power of ten of the first digit
    """
    sign: int
    digits: str
    exponent: int

    @property
    def mantissa(self) -> float:
        """Signed mantissa d.dd, e.g. -6.33"""
        return math.copysign(float(self._decimal), self.sign)

    @property
    def value(self) -> float:
        """The rounded number, mantissa × 10^exponent."""
        return math.copysign(float(self._decimal.scaleb(self.exponent)), self.sign)

    @property
    def _decimal(self) -> Decimal:
        return Decimal(f"{self.digits[0]}.{self.digits[1:]}")


# Methods --------------------------------------------------------------------------------------------------------------

def std_float(value) -> float:
    """
    Convert a real number to a finite Python float.

    Accepts int, float, Decimal, Fraction and third-party scalars exposing .item()
    (NumPy, PyTorch) or __float__.

    Raises:
        TypeError: For None, bool, str and other unsupported types.
        ValueError: For NaN and infinite values, including ints or Decimals too large for a float.

    Examples:
        >>> std_float(3)
        3.0
        >>> std_float(Decimal("0.125"))
        0.125
    """
    if value is None or isinstance(value, (bool, str, bytes)):
        raise TypeError(f"real number required, got {fmt_type(value)}")

    if isinstance(value, float):
        result = value
    elif isinstance(value, int):
        result = _int_to_float(value)
    elif hasattr(value, "item") and callable(value.item):
        # Array and tensor scalars, respect the Python scalar they hold
        try:
            item = value.item()
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} via .item(): {e}") from e
        return std_float(item)
    elif hasattr(value, "__index__"):
        result = _int_to_float(operator.index(value))
    elif isinstance(value, SupportsFloat):
        # float() rejects signaling NaN instead of converting it
        if isinstance(value, Decimal) and value.is_nan():
            raise ValueError("NaN values are not supported")
        try:
            result = float(value)
        except OverflowError as e:
            raise ValueError(f"Value too large for a float: {fmt_type(value)}") from e
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e
    else:
        raise TypeError(
            f"unsupported numeric type: {fmt_type(value)}. "
            f"Expected int, float, or types implementing __index__, __float__ or .item()"
        )

    if math.isnan(result):
        raise ValueError("NaN values are not supported")
    if math.isinf(result):
        raise ValueError(f"Infinite values are not supported, got {fmt_value(value)}")
    return result


def decompose(value) -> Decomposed:
    """
    Split a number into sign, normalized mantissa and power of ten.

    The mantissa is the magnitude in [1, 10) taken to seven significant digits,
    rounded half-to-even from the exact binary value.

    Examples:
        >>> decompose(-234.5e-03)
        Decomposed(sign=-1, mantissa=2.345, exponent=-1)
        >>> decompose(0)
        Decomposed(sign=1, mantissa=0.0, exponent=0)
    """
    sign, mantissa, exponent = decimal_parts(value)
    return Decomposed(sign, float(mantissa), exponent)


def split_float(value) -> tuple[float, int]:
    """
    Signed mantissa and exponent of a number as it is normalized in scientific notation.

    Examples:
        >>> split_float(0.123)
        (1.23, -1)
        >>> split_float(-1230.0)
        (-1.23, 3)
    """
    parts = decompose(value)
    return parts.signed_mantissa, parts.exponent


def round3(value) -> Rounded:
    """
    Round a number to three significant digits, half-up on the fourth digit.

    A carry out of the third digit that reaches 10 moves the number to the next power
    of ten, so 9.995 gives digits "100" at exponent 1. Negative numbers round by
    magnitude.

    Examples:
        >>> round3(6.325e-07)
        Rounded(sign=1, digits='633', exponent=-7)
        >>> round3(-9.995)
        Rounded(sign=-1, digits='100', exponent=1)
    """
    sign, mantissa, exponent = decimal_parts(value)

    step = Decimal(1).scaleb(1 - SIG_DIGITS)
    mantissa = mantissa.quantize(step, rounding=ROUND_HALF_UP)
    if mantissa >= _TEN:
        # 9.995 -> 10.00, renormalize once; 1.00 can not carry again
        mantissa = (mantissa / _TEN).quantize(step, rounding=ROUND_HALF_UP)
        exponent += 1

    digits = f"{mantissa:.{SIG_DIGITS - 1}f}".replace(".", "")
    return Rounded(sign, digits, exponent)


def decimal_parts(value) -> tuple[int, Decimal, int]:
    """
    Sign, Decimal mantissa and exponent of a finite number.

    Same split as decompose() with the mantissa kept as a normalized Decimal, e.g.
    (-1, Decimal('6.325'), 2) for -632.5, for callers that scale it exactly.
    """
    f = std_float(value)
    sign = -1 if math.copysign(1.0, f) < 0 else 1

    if f == 0:
        return sign, Decimal(0), 0

    exact = Decimal(abs(f))  # exact binary value
    exponent = exact.adjusted()

    # Quantize at the seventh significant digit, result coefficient fits default context precision
    rounded = exact.quantize(Decimal(1).scaleb(exponent - MANTISSA_DIGITS + 1), rounding=ROUND_HALF_EVEN)
    if rounded.adjusted() > exponent:
        exponent += 1

    mantissa = rounded.scaleb(-exponent).normalize()
    return sign, mantissa, exponent


def std_int(value, name: str = "value") -> int:
    """
    Validate an integer argument such as an exponent or band index, return it as a plain int.

    Raises:
        TypeError: If value is not an int, bool is rejected as well.
    """
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {fmt_type(value)}")
    return int(value)


# Private Methods ------------------------------------------------------------------------------------------------------

def _int_to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError as e:
        raise ValueError(f"Integer too large for a float: {fmt_type(value)}") from e

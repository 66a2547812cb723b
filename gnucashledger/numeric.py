# numeric.py --- Exact GNU Cash numeric values


# Copyright (C) 2012 Jorgen Schaefer <forcer@forcix.cx>

# Author: Jorgen Schaefer <forcer@forcix.cx>

# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 3
# of the License, or (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.

# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import math
import re

from .errors import DivisionByZeroError, MalformedNumericError

_NUMERIC_RE = re.compile(r"^([+-]?[0-9]+)(?:/([+-]?[0-9]+))?$")


def gcd(a, b):
    """Return the greatest common divisor of |a| and |b|; gcd(0, 0) is 0."""
    return math.gcd(abs(a), abs(b))


def lcm(a, b):
    """
    Return the least common multiple of |a| and |b|.

    lcm(0, 0) is 0, so the result must be checked before dividing by it.
    """
    a, b = abs(a), abs(b)
    g = gcd(a, b)
    if g == 0:
        return 0
    return (a // g) * b


class Numeric:
    """
    An exact fraction num/den as stored in GNU Cash files.

    Values are never reduced to lowest terms: 10/10 and 1/1 are
    different values. The denominator is kept non-negative. A
    denominator of zero is a legal way to say "zero", whatever the
    numerator, and such values compare equal to every other zero.
    A zero numerator also makes a value zero for ==, so 0/1 == 0/5.
    Plain ints compare as n/1.
    """
    __slots__ = ("num", "den")

    def __init__(self, num=0, den=1):
        if den < 0:
            num, den = -num, -den
        object.__setattr__(self, "num", num)
        object.__setattr__(self, "den", den)

    def __setattr__(self, name, value):
        raise AttributeError("Numeric values are immutable")

    @classmethod
    def from_string(cls, text):
        """
        Parse "num/den" or a bare integer "num".

        Unlike arithmetic results, a zero denominator in the text is
        rejected with DivisionByZeroError.
        """
        if text is None:
            raise MalformedNumericError("Missing numeric value")
        match = _NUMERIC_RE.match(text.strip())
        if match is None:
            raise MalformedNumericError("Invalid numeric value", value=text)
        num = int(match.group(1))
        if match.group(2) is None:
            return cls(num, 1)
        den = int(match.group(2))
        if den == 0:
            raise DivisionByZeroError("Division by zero in numeric value",
                                      value=text)
        return cls(num, den)

    def __repr__(self):
        return "<Numeric {}/{}>".format(self.num, self.den)

    def __str__(self):
        if self.den == 0:
            return "0"
        if self.den == 1:
            return str(self.num)
        return "{}/{}".format(self.num, self.den)

    def is_zero(self):
        return self.num == 0 or self.den == 0

    def __bool__(self):
        return not self.is_zero()

    def sign(self):
        """Return -1, 0 or +1. Any zero-denominator value has sign 0."""
        if self.den == 0 or self.num == 0:
            return 0
        return 1 if self.num > 0 else -1

    def negate(self):
        return Numeric(-self.num, self.den)

    __neg__ = negate

    def add(self, other):
        other = _coerce(other)
        if other.den == 0:
            return self
        if self.den == 0:
            return other
        if self.den == other.den:
            return Numeric(self.num + other.num, self.den)
        m = lcm(self.den, other.den)
        return Numeric(self.num * (m // self.den) +
                       other.num * (m // other.den), m)

    def subtract(self, other):
        return self.add(_coerce(other).negate())

    def __add__(self, other):
        if not isinstance(other, (Numeric, int)):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return _coerce(other).add(self)

    def __sub__(self, other):
        if not isinstance(other, (Numeric, int)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return _coerce(other).subtract(self)

    def __eq__(self, other):
        if not isinstance(other, (Numeric, int)):
            return NotImplemented
        other = _coerce(other)
        if self.is_zero() or other.is_zero():
            return self.is_zero() and other.is_zero()
        return self.num == other.num and self.den == other.den

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        if self.is_zero():
            return hash(0)
        if self.den == 1:
            return hash(self.num)
        return hash((self.num, self.den))

    def __float__(self):
        # Display only, never fed back into exact arithmetic.
        if self.num == 0 or self.den == 0:
            return 0.0
        return self.num / self.den

    def __reduce__(self):
        return (Numeric, (self.num, self.den))


def _coerce(value):
    if isinstance(value, Numeric):
        return value
    if isinstance(value, int):
        return Numeric(value, 1)
    raise TypeError("Cannot use {!r} as a Numeric".format(value))


parse_numeric = Numeric.from_string

ZERO = Numeric(0, 0)

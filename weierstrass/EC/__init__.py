import logging
from collections import namedtuple
from typing import Optional, Tuple, Union

from weierstrass.config import METHOD, current_method
from weierstrass.error import CurveMismatchError, NegativeScalarError, NotOnCurveError
from weierstrass.number_theory import inverse_mod

__all__ = ['Curve', 'Point', 'Value']

logger = logging.getLogger(__name__)

Value = namedtuple('Value', ['x', 'y'])
PointValue = Optional[Value]


class Curve:
    """Short Weierstrass curve y^2 = x^3 + a*x + b over the prime field Fp"""

    __slots__ = ('p', 'a', 'b', 'name')

    def __init__(self, p: int, a: int, b: int, name: str = None):
        object.__setattr__(self, 'p', p)
        object.__setattr__(self, 'a', a)
        object.__setattr__(self, 'b', b)
        object.__setattr__(self, 'name', name)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return NotImplemented
        return (self.p, self.a, self.b) == (other.p, other.a, other.b)

    def __hash__(self):
        return hash((self.p, self.a, self.b))

    def __repr__(self):
        if self.name:
            return f"Curve({self.name})"
        return f"Curve(p={self.p}, a={self.a}, b={self.b})"

    def f(self, x: int) -> int:
        """Compute x^3 + ax + b in field Fp"""
        return (x ** 3 + self.a * x + self.b) % self.p

    def discriminant(self) -> int:
        """-16(4a^3 + 27b^2) in Fp, zero for a singular curve. Never checked by the arithmetic."""
        return (-16 * (4 * self.a ** 3 + 27 * self.b ** 2)) % self.p

    @property
    def infinity(self) -> 'Point':
        return Point.infinity(self)

    def point(self, x: int, y: int) -> 'Point':
        point = Point.from_value(self, (x, y))
        if not point.is_valid():
            raise NotOnCurveError(f"Point {x}, {y} not on {self!r}")
        return point

    def _check(self, *points: 'Point'):
        for point in points:
            if point.curve != self:
                raise CurveMismatchError(f"{point!r} is not on {self!r}")

    def point_double(self, P: 'Point') -> 'Point':
        """https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication#Point_doubling"""
        self._check(P)
        if P.is_infinity():
            return P

        p = self.p
        x, y = P.value()
        lam = ((3 * x * x + self.a) * inverse_mod(2 * y, p)) % p
        rx = (lam * lam - 2 * x) % p
        ry = (lam * (x - rx) - y) % p
        return Point(self, Value(rx, ry))

    def point_add(self, P1: 'Point', P2: 'Point') -> 'Point':
        """https://en.wikipedia.org/wiki/Elliptic_curve_point_multiplication#Point_addition"""
        self._check(P1, P2)
        if P2.is_infinity():
            return P1
        if P1.is_infinity():
            return P2

        p = self.p
        x1, y1 = P1.value()
        x2, y2 = P2.value()

        if x1 == x2:
            if (y1 + y2) % p == 0:
                return self.infinity
            return self.point_double(P1)

        lam = ((y2 - y1) * inverse_mod(x2 - x1, p)) % p
        rx = (lam * lam - x1 - x2) % p
        ry = (lam * (x1 - rx) - y1) % p
        return Point(self, Value(rx, ry))

    def point_neg(self, P: 'Point') -> 'Point':
        self._check(P)
        if P.is_infinity():
            return P
        return Point(self, Value(P.x, -P.y))

    def point_mul(self, P: 'Point', k: int, method: Union[METHOD, str] = None) -> 'Point':
        """
            P added to itself k times.

            Both methods give the same point. DOUBLE_AND_ADD scans the bits of k from the
            top and doubles through point_add, so a point of order 2 collapses to infinity
            the same way repeated addition does instead of failing in point_double.
        """
        if not isinstance(k, int):
            raise TypeError('Multiplication is only defined between a point and an integer')
        if k < 0:
            raise NegativeScalarError(k)
        self._check(P)

        method = current_method() if method is None else METHOD(method)
        logger.debug('Multiplying by a %d-bit scalar on %r using %s', k.bit_length(), self, method.value)

        if k == 0:
            return self.infinity

        if method is METHOD.REPEATED_ADDITION:
            R = P
            for _ in range(k - 1):
                R = self.point_add(R, P)
            return R

        R = self.infinity
        for bit in format(k, 'b'):
            R = self.point_add(R, R)
            if bit == '1':
                R = self.point_add(R, P)
        return R


class Point:
    """Either the point at infinity or an affine (x, y) pair, bound to one curve"""

    __slots__ = ('curve', '_value')

    def __init__(self, curve: Curve, value: PointValue = None):
        if value is not None:
            x, y = value
            value = Value(x % curve.p, y % curve.p)
        object.__setattr__(self, 'curve', curve)
        object.__setattr__(self, '_value', value)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @classmethod
    def from_value(cls, curve: Curve, value: Union[PointValue, Tuple[int, int]]) -> 'Point':
        return cls(curve, value)

    @classmethod
    def infinity(cls, curve: Curve) -> 'Point':
        return cls(curve, None)

    def value(self) -> PointValue:
        return self._value

    @property
    def x(self) -> Optional[int]:
        return None if self._value is None else self._value.x

    @property
    def y(self) -> Optional[int]:
        return None if self._value is None else self._value.y

    def is_infinity(self) -> bool:
        return self._value is None

    def is_valid(self) -> bool:
        if self._value is None:
            return True
        x, y = self._value
        return (y * y - (x * x * x + self.curve.a * x + self.curve.b)) % self.curve.p == 0

    def double(self) -> 'Point':
        return self.curve.point_double(self)

    def add(self, other: 'Point') -> 'Point':
        return self.curve.point_add(self, other)

    def negate(self) -> 'Point':
        return self.curve.point_neg(self)

    def multiply(self, k: int, method: Union[METHOD, str] = None) -> 'Point':
        return self.curve.point_mul(self, k, method=method)

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __neg__(self):
        return self.negate()

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other.negate())

    def __mul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.curve == other.curve and self._value == other._value

    def __hash__(self):
        return hash((self.curve, self._value))

    def __repr__(self):
        if self._value is None:
            return f"Point(INF, {self.curve.name})"
        return f"Point({self.x}, {self.y}, {self.curve.name})"

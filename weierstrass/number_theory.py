import logging

from weierstrass.error import NotInvertibleError

__all__ = ['xgcd', 'inverse_mod', 'mulinv']

logger = logging.getLogger(__name__)


def xgcd(b, n):
    """Takes integers b, n as input, and return a triple (g, x, y), such that bx + ny = g = gcd(b, n)"""
    x0, x1, y0, y1 = 1, 0, 0, 1
    while n != 0:
        q, b, n = b // n, n, b % n
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return b, x0, y0


def inverse_mod(a: int, m: int) -> int:
    """
        Multiplicative inverse of a modulo m via the extended Euclidean algorithm.

        Returns the unique r in [0, m) with a * r = 1 (mod m). Raises
        NotInvertibleError when a and m are not coprime, which for a prime m
        means a is a multiple of m.
    """
    if m <= 0:
        raise ValueError(f'Modulus must be positive, got {m}')

    if a < 0 or a >= m:
        a = a % m  # floor modulo, a may be negative

    g, x, _ = xgcd(a, m)
    if g != 1:
        logger.debug('No inverse of %d modulo %d (gcd %d)', a, m, g)
        raise NotInvertibleError(a, m, g)

    return x if x >= 0 else x + m


mulinv = inverse_mod

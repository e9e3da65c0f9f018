"""Curves used across the test suite"""

from weierstrass import Curve, Point

# y^2 = x^3 + x + 7 over F13, a cyclic group of prime order 13
TOY = Curve(13, 1, 7, name='toy')
TOY_ORDER = 13
TOY_POINTS = [TOY.point(x, y) for x in range(13) for y in range(13) if (y * y - TOY.f(x)) % 13 == 0]

# y^2 = x^3 + x over F13, (0, 0) has order 2
TWO_TORSION = Curve(13, 1, 0, name='two-torsion')
T = Point.from_value(TWO_TORSION, (0, 0))

P = 2 ** 256 - 2 ** 32 - 977
N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SECP256K1 = Curve(P, 0, 7, name='secp256k1')

G = SECP256K1.point(
    0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
    0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8
)
G2 = SECP256K1.point(
    0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
    0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A
)
G3 = SECP256K1.point(
    0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9,
    0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672
)

class ArithmeticContractError(Exception):
    pass


class NotInvertibleError(ArithmeticContractError, ArithmeticError):
    def __init__(self, value, modulus, gcd):
        self.value = value
        self.modulus = modulus
        self.gcd = gcd
        super().__init__(f'{value} has no inverse modulo {modulus} (gcd is {gcd})')


class NegativeScalarError(ArithmeticContractError, ValueError):
    def __init__(self, scalar):
        self.scalar = scalar
        super().__init__(f'Scalar must be non-negative, got {scalar}')


class CurveMismatchError(ArithmeticContractError):
    pass


class NotOnCurveError(ArithmeticContractError, ValueError):
    pass

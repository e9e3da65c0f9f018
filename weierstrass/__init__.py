"""
Zero dependency implementation of the group law of short Weierstrass elliptic curves over prime fields.
"""

from .EC import *
from .config import *
from .error import *
from .number_theory import *

__all__ = [
    'Curve', 'Point', 'Value',
    'METHOD', 'current_method',
    'xgcd', 'inverse_mod', 'mulinv',
    'ArithmeticContractError', 'NotInvertibleError', 'NegativeScalarError',
    'CurveMismatchError', 'NotOnCurveError',
]

__version__ = "0.1"

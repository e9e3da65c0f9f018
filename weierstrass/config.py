import os
from enum import Enum, unique

__all__ = ['METHOD', 'current_method']


@unique
class METHOD(Enum):
    DOUBLE_AND_ADD = 'double_and_add'
    REPEATED_ADDITION = 'repeated_addition'


def current_method():
    return METHOD(os.environ.get('WEIERSTRASS_MULTIPLY', 'double_and_add'))

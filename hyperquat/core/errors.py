"""
Exceptions raised by hyperquat.
"""


class DegenerateDivisionError(ZeroDivisionError):
    """
    Division by a value that has no multiplicative inverse.

    For the elliptic signature this is the zero value. For the split and
    hyperbolic signatures it is any value on the null cone, i.e. any value
    whose quadrance is zero within tolerance.
    """

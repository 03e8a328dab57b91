# catad/ad/__init__.py
# AD categories: forward mode, CPS, transposes, and the drivers built on them

from .forward import D, DCategory, linear_d
from .cont import Cont, ContCategory, cont
from .dual import Dual, DualCategory, DualPrime, DualPrimeCategory, as_dual_prime
from .begin import Begin, BeginCategory, begin

# Example expressions module
from . import expressions
from .seeds import (
    value,
    derivative,
    jvp,
    jacobian,
    reverse_derivative,
    gradient,
)

__all__ = [
    # Forward mode
    'D', 'DCategory', 'linear_d',
    # CPS
    'Cont', 'ContCategory', 'cont',
    # Reverse mode
    'Dual', 'DualCategory', 'DualPrime', 'DualPrimeCategory', 'as_dual_prime',
    'Begin', 'BeginCategory', 'begin',
    # Drivers
    'expressions',
    'value', 'derivative', 'jvp', 'jacobian', 'reverse_derivative', 'gradient',
]

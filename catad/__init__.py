# catad/__init__.py
# Categorical automatic differentiation

from .config import NumericConfig, get_config, set_config
from .core import (
    VectorSpace, ScalarSpace, ProductSpace, IndexedSpace, Left, Right,
    lin_comb, compose, SCALAR, Fun, FUN,
)
from .vector import (
    LinMap, LinMapSpace, LINMAP, as_fun, to_matrix,
    DualVector, DualSpace, to_dual, from_dual, to_dual_map, from_dual_map,
    Tensor, TensorSpace, curry, uncurry, map_tensor,
)
from .ad import (
    D, DCategory, linear_d,
    Cont, ContCategory, cont,
    Dual, DualCategory, DualPrime, DualPrimeCategory, as_dual_prime,
    Begin, BeginCategory, begin,
    value, derivative, jvp, jacobian, reverse_derivative, gradient,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    'NumericConfig', 'get_config', 'set_config',
    # Spaces
    'VectorSpace', 'ScalarSpace', 'ProductSpace', 'IndexedSpace', 'Left', 'Right',
    'lin_comb', 'compose', 'SCALAR', 'Fun', 'FUN',
    # Linear maps, duals, tensors
    'LinMap', 'LinMapSpace', 'LINMAP', 'as_fun', 'to_matrix',
    'DualVector', 'DualSpace', 'to_dual', 'from_dual', 'to_dual_map', 'from_dual_map',
    'Tensor', 'TensorSpace', 'curry', 'uncurry', 'map_tensor',
    # AD categories
    'D', 'DCategory', 'linear_d',
    'Cont', 'ContCategory', 'cont',
    'Dual', 'DualCategory', 'DualPrime', 'DualPrimeCategory', 'as_dual_prime',
    'Begin', 'BeginCategory', 'begin',
    # Drivers
    'value', 'derivative', 'jvp', 'jacobian', 'reverse_derivative', 'gradient',
]

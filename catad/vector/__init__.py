# catad/vector/__init__.py
# Concrete representation layer: linear maps, dual spaces, tensor products

from .linmap import LinMap, LinMapCategory, LinMapSpace, LINMAP, as_fun, to_matrix
from .dual import (
    DualVector, DualSpace,
    to_dual, from_dual, to_dual_map, from_dual_map,
    check_dual_roundtrip,
)
from .tensor import Tensor, TensorSpace, curry, uncurry, map_tensor

__all__ = [
    "LinMap", "LinMapCategory", "LinMapSpace", "LINMAP", "as_fun", "to_matrix",
    "DualVector", "DualSpace",
    "to_dual", "from_dual", "to_dual_map", "from_dual_map",
    "check_dual_roundtrip",
    "Tensor", "TensorSpace", "curry", "uncurry", "map_tensor",
]

# catad/core/__init__.py

"""
Core vocabulary of the package.

Exports:
    VectorSpace, ScalarSpace, ProductSpace, IndexedSpace : object descriptors
    Left, Right       : tagged basis elements of a product
    lin_comb, compose : rebuild vectors from coefficients
    SCALAR            : the default scalar (answer) object
    Morphism          : common base of all morphism representations
    Category ... HasDot : capability interfaces consumed by the AD categories
    Fun, FUN          : the plain-function category
"""

from .space import (
    VectorSpace, ScalarSpace, ProductSpace, IndexedSpace,
    Left, Right, lin_comb, compose, check_space, SCALAR,
)
from .category import (
    Morphism, Category, Monoidal, Cartesian, Cocartesian, Additive, Scalable,
    NumCat, FloatingCat, MonoidalI, CartesianI, CocartesianI, HasDot, require,
)
from .fun import Fun, FunCategory, FUN

__all__ = [
    "VectorSpace", "ScalarSpace", "ProductSpace", "IndexedSpace",
    "Left", "Right", "lin_comb", "compose", "check_space", "SCALAR",
    "Morphism", "Category", "Monoidal", "Cartesian", "Cocartesian",
    "Additive", "Scalable", "NumCat", "FloatingCat",
    "MonoidalI", "CartesianI", "CocartesianI", "HasDot", "require",
    "Fun", "FunCategory", "FUN",
]

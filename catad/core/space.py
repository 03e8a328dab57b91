# catad/core/space.py
"""
Finite-dimensional vector spaces with explicit basis decomposition.

A space is an immutable descriptor object. Vectors themselves are plain
values (floats, tuples, ...) and every operation on them goes through the
descriptor, the same way a type-class dictionary would be passed around.

Contract (checked by the tests, not at run time):
    compose(space, space.decompose(v)) == v
    space.decompose(space.basis_value(b)) is the indicator of b
    decompose is linear

Decompositions are dicts {basis: coefficient}. A missing key means zero.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np

from ..config import get_config


class VectorSpace(ABC):
    """
    Abstract vector space over a scalar field.

    Subclasses define the additive structure (zero, add), the scalar action
    and the basis: `decompose` maps a vector to its coordinates and
    `basis_value` maps a basis element back to a vector.
    """

    @property
    @abstractmethod
    def field(self) -> type:
        """Scalar field (numpy scalar type) the space is defined over."""
        ...

    @abstractmethod
    def zero(self) -> Any:
        ...

    @abstractmethod
    def add(self, u, v) -> Any:
        ...

    @abstractmethod
    def scale(self, s, v) -> Any:
        ...

    @abstractmethod
    def decompose(self, v) -> Dict[Any, Any]:
        ...

    @abstractmethod
    def basis_value(self, b) -> Any:
        ...

    # ----- derived operations -----
    def basis(self) -> List[Any]:
        """All basis elements, in canonical order (keys of the zero decomposition)."""
        return list(self.decompose(self.zero()).keys())

    def dim(self) -> int:
        return len(self.basis())

    def neg(self, v):
        return self.scale(-1.0, v)

    def sub(self, u, v):
        return self.add(u, self.neg(v))

    def coefficient(self, v, b):
        """Coefficient of v at basis element b (zero when absent)."""
        return self.decompose(v).get(b, self.field(0))

    def allclose(self, u, v, atol: float = None, rtol: float = None) -> bool:
        """Compare two vectors coefficient-wise within tolerance."""
        cfg = get_config()
        du, dv = self.decompose(u), self.decompose(v)
        keys = list(dict.fromkeys([*du.keys(), *dv.keys()]))
        if not keys:
            return True
        a = np.array([du.get(k, 0.0) for k in keys])
        b = np.array([dv.get(k, 0.0) for k in keys])
        return bool(np.allclose(a, b,
                                atol=cfg.atol if atol is None else atol,
                                rtol=cfg.rtol if rtol is None else rtol))


def lin_comb(space: VectorSpace, pairs: Iterable[Tuple[Any, Any]]):
    """Linear combination sum(s * v) for (v, s) in pairs; empty gives zero."""
    return reduce(space.add, (space.scale(s, v) for v, s in pairs), space.zero())


def compose(space: VectorSpace, coeffs: Dict[Any, Any]):
    """Rebuild a vector from its decomposition (inverse of decompose)."""
    return lin_comb(space, [(space.basis_value(b), s) for b, s in coeffs.items()])


def check_space(*spaces):
    for a in spaces:
        if not isinstance(a, VectorSpace):
            raise TypeError(f"Expected a VectorSpace instance, got {type(a).__name__}: {a!r}")


def check_scalar(s, op: str):
    """Numeric primitives only exist on a scalar object."""
    if not isinstance(s, ScalarSpace):
        raise TypeError(f"{op} needs a ScalarSpace object, got {s!r}")


# ---------------------------------------------------------------------------
# Tagged basis for binary products
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Left:
    """Basis element of the left factor of a product."""
    value: Any = ()


@dataclass(frozen=True)
class Right:
    """Basis element of the right factor of a product."""
    value: Any = ()


# ---------------------------------------------------------------------------
# Instances
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScalarSpace(VectorSpace):
    """The field itself, one-dimensional with basis {()}."""
    dtype: type = np.float64

    @property
    def field(self):
        return self.dtype

    def zero(self):
        return self.dtype(0)

    def add(self, u, v):
        return u + v

    def scale(self, s, v):
        return s * v

    def decompose(self, v):
        return {(): v}

    def basis_value(self, b):
        if b != ():
            raise ValueError(f"{b!r} is not a basis element of {self!r}")
        return self.dtype(1)

    def __repr__(self):
        return "R" if self.dtype is np.float64 else f"ScalarSpace({self.dtype.__name__})"


@dataclass(frozen=True)
class ProductSpace(VectorSpace):
    """
    Binary product (a, b). Vectors are 2-tuples.

    Basis is the tagged union Left(basis a) | Right(basis b) and the
    decomposition is the concatenation of both factors' decompositions.
    """
    left: VectorSpace
    right: VectorSpace

    def __post_init__(self):
        check_space(self.left, self.right)
        if self.left.field is not self.right.field:
            raise ValueError(
                f"Product factors must share a scalar field, got "
                f"{self.left.field.__name__} and {self.right.field.__name__}"
            )

    @property
    def field(self):
        return self.left.field

    def zero(self):
        return (self.left.zero(), self.right.zero())

    def add(self, u, v):
        return (self.left.add(u[0], v[0]), self.right.add(u[1], v[1]))

    def scale(self, s, v):
        return (self.left.scale(s, v[0]), self.right.scale(s, v[1]))

    def decompose(self, v):
        out = {Left(k): c for k, c in self.left.decompose(v[0]).items()}
        out.update((Right(k), c) for k, c in self.right.decompose(v[1]).items())
        return out

    def basis_value(self, b):
        if isinstance(b, Left):
            return (self.left.basis_value(b.value), self.right.zero())
        if isinstance(b, Right):
            return (self.left.zero(), self.right.basis_value(b.value))
        raise ValueError(f"{b!r} is not a basis element of {self!r}")

    def __repr__(self):
        return f"({self.left!r}, {self.right!r})"


@dataclass(frozen=True)
class IndexedSpace(VectorSpace):
    """
    Fixed-shape family of n copies of `space`. Vectors are n-tuples.

    Closure property: whenever the element space is additive, so is the
    family (element-wise zip and sum). Basis elements are (index, basis).
    """
    space: VectorSpace
    n: int

    def __post_init__(self):
        check_space(self.space)
        if self.n < 1:
            raise ValueError(f"IndexedSpace needs n >= 1, got {self.n}")

    @property
    def field(self):
        return self.space.field

    def zero(self):
        return tuple(self.space.zero() for _ in range(self.n))

    def add(self, u, v):
        return tuple(self.space.add(x, y) for x, y in zip(u, v))

    def scale(self, s, v):
        return tuple(self.space.scale(s, x) for x in v)

    def decompose(self, v):
        return {(i, k): c
                for i, x in enumerate(v)
                for k, c in self.space.decompose(x).items()}

    def basis_value(self, b):
        i, inner = b
        if not 0 <= i < self.n:
            raise ValueError(f"Index {i} out of range for {self!r}")
        return tuple(self.space.basis_value(inner) if j == i else self.space.zero()
                     for j in range(self.n))

    def __repr__(self):
        return f"{self.space!r}^{self.n}"


# The default answer/scalar object
SCALAR = ScalarSpace()

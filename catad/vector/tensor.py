# catad/vector/tensor.py
"""
Tensor product a ⊗ b and currying of linear maps.

A tensor is a sparse coefficient table keyed by pairs (basis of a, basis of
b). Zero materialises every pair so that addition (union with sum) never
drops a dimension whose coefficient is zero on one side.

    curry   : Hom(a ⊗ b, c) -> Hom(a, Hom(b, c))
    uncurry : inverse of curry
    map_tensor(f, g) : (a ⊗ c) -> (b ⊗ d), outer product per basis pair
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..core.space import VectorSpace, check_space
from .linmap import LinMap, LinMapSpace


class Tensor:
    __slots__ = ("coeffs",)

    def __init__(self, coeffs: Dict[Tuple[Any, Any], Any]):
        self.coeffs = dict(coeffs)

    def __repr__(self):
        return f"Tensor({self.coeffs!r})"


@dataclass(frozen=True)
class TensorSpace(VectorSpace):
    left: VectorSpace
    right: VectorSpace

    def __post_init__(self):
        check_space(self.left, self.right)
        if self.left.field is not self.right.field:
            raise ValueError("Tensor factors must share a scalar field")

    @property
    def field(self):
        return self.left.field

    def zero(self):
        z = self.field(0)
        return Tensor({(ba, bb): z
                       for ba in self.left.basis()
                       for bb in self.right.basis()})

    def add(self, u, v):
        out = dict(u.coeffs)
        for k, c in v.coeffs.items():
            out[k] = out[k] + c if k in out else c
        return Tensor(out)

    def scale(self, s, u):
        return Tensor({k: c * s for k, c in u.coeffs.items()})

    def decompose(self, u):
        return dict(u.coeffs)

    def basis_value(self, b):
        return Tensor({b: self.field(1)})

    def __repr__(self):
        return f"({self.left!r} ⊗ {self.right!r})"


def curry(f: LinMap) -> LinMap:
    if not isinstance(f.dom, TensorSpace):
        raise ValueError(f"curry expects a map out of a tensor product, got {f!r}")
    a, b, c = f.dom.left, f.dom.right, f.cod
    fn = f.fn

    def g(ba):
        return LinMap(b, c, lambda bb: fn((ba, bb)))

    return LinMap(a, LinMapSpace(b, c), g)


def uncurry(f: LinMap) -> LinMap:
    if not isinstance(f.cod, LinMapSpace):
        raise ValueError(f"uncurry expects a map into a space of linear maps, got {f!r}")
    a, b, c = f.dom, f.cod.dom, f.cod.cod
    fn = f.fn
    return LinMap(TensorSpace(a, b), c, lambda key: fn(key[0]).fn(key[1]))


def map_tensor(f: LinMap, g: LinMap) -> LinMap:
    b, d = f.cod, g.cod
    ff, gf = f.fn, g.fn

    def h(key):
        ba, bc = key
        m1 = b.decompose(ff(ba))
        m2 = d.decompose(gf(bc))
        return Tensor({(bb, bd): s1 * s2
                       for bb, s1 in m1.items()
                       for bd, s2 in m2.items()})

    return LinMap(TensorSpace(f.dom, g.dom), TensorSpace(b, d), h)

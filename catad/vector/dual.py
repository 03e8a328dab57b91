# catad/vector/dual.py
"""
Dual vector spaces.

The dual of a is the space of linear functionals a -> field. It has the same
basis as a, so for finite-dimensional spaces

    from_dual(a, to_dual(a, v)) == v

and dualising a linear map is a structural transpose of its basis table:

    from_dual_map(to_dual_map(f)) == f
"""

from __future__ import annotations
from dataclasses import dataclass

from ..core.space import SCALAR, Left, ProductSpace, ScalarSpace, VectorSpace, check_space, compose
from .linmap import LinMap


class DualVector:
    """A linear functional on some space, stored as a LinMap into its field."""
    __slots__ = ("functional",)

    def __init__(self, functional: LinMap):
        if not isinstance(functional, LinMap):
            raise TypeError("functional must be a LinMap instance")
        self.functional = functional

    def __call__(self, x):
        return self.functional(x)

    def __repr__(self):
        return f"DualVector({self.functional.dom!r})"


@dataclass(frozen=True)
class DualSpace(VectorSpace):
    space: VectorSpace

    def __post_init__(self):
        check_space(self.space)

    @property
    def field(self):
        return self.space.field

    @property
    def scalars(self) -> ScalarSpace:
        return ScalarSpace(self.space.field)

    def _functional(self, fn) -> DualVector:
        return DualVector(LinMap(self.space, self.scalars, fn))

    # Scalar arithmetic is done with the field's own + and *
    def zero(self):
        z = self.field(0)
        return self._functional(lambda _: z)

    def add(self, u, v):
        f, g = u.functional.fn, v.functional.fn
        return self._functional(lambda b: f(b) + g(b))

    def scale(self, s, u):
        f = u.functional.fn
        return self._functional(lambda b: s * f(b))

    def decompose(self, u):
        f = u.functional.fn
        return {b: f(b) for b in self.space.basis()}

    def basis_value(self, b):
        one, z = self.field(1), self.field(0)
        return self._functional(lambda b2: one if b2 == b else z)

    def __repr__(self):
        return f"Dual({self.space!r})"


def to_dual(a: VectorSpace, v) -> DualVector:
    m = a.decompose(v)
    z = a.field(0)
    return DualVector(LinMap(a, ScalarSpace(a.field), lambda b: m.get(b, z)))


def from_dual(a: VectorSpace, dv: DualVector):
    f = dv.functional.fn
    return compose(a, {b: f(b) for b in a.basis()})


def to_dual_map(f: LinMap) -> LinMap:
    """f : a -> b  gives its transpose  Dual b -> Dual a."""
    a, b = f.dom, f.cod
    scalars = ScalarSpace(a.field)
    z = a.field(0)

    def g(bb):
        # coefficient of bb in f(ba), as a functional of ba
        return DualVector(LinMap(a, scalars, lambda ba: b.decompose(f.fn(ba)).get(bb, z)))

    return LinMap(DualSpace(b), DualSpace(a), g)


def from_dual_map(f: LinMap) -> LinMap:
    """f : Dual b -> Dual a  gives the map  a -> b  it is the transpose of."""
    if not isinstance(f.dom, DualSpace) or not isinstance(f.cod, DualSpace):
        raise ValueError(f"from_dual_map expects a map between dual spaces, got {f!r}")
    a, b = f.cod.space, f.dom.space

    def g(ba):
        return compose(b, {bb: f.fn(bb).functional.fn(ba) for bb in b.basis()})

    return LinMap(a, b, g)


def check_dual_roundtrip():
    """
    Self-check on f(a, b) = 2a + 3b: evaluating at (2, 1) gives 7 both
    directly and after a to_dual_map/from_dual_map round trip.
    """
    f = LinMap(ProductSpace(SCALAR, SCALAR), SCALAR,
               lambda b: 2.0 if isinstance(b, Left) else 3.0)
    f2 = from_dual_map(to_dual_map(f))
    return f((2.0, 1.0)) == 7, f2((2.0, 1.0)) == 7

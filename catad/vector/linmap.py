# catad/vector/linmap.py
"""
Linear maps represented by their action on basis elements.

A LinMap a -> b owns one function `basis of a -> vector of b`; nothing else
is stored. Applying it to a vector x is the linear combination

    f(x) = sum(f.fn(basis) * coeff  for basis, coeff in a.decompose(x))

so composition is function composition and is evaluated lazily, there is no
matrix multiply. `to_matrix` materialises the table on demand.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np

from ..core.category import (
    Additive, Cartesian, CartesianI, Cocartesian, CocartesianI, HasDot,
    Morphism, MonoidalI, Scalable, check_family,
)
from ..core.space import (
    SCALAR, IndexedSpace, Left, ProductSpace, Right, ScalarSpace,
    VectorSpace, check_space, compose, lin_comb,
)


class LinMap(Morphism):
    """
    Linear map dom -> cod given by `fn: basis of dom -> vector of cod`.

    Calling the map evaluates it on an arbitrary vector (`as_fun`).
    """
    __slots__ = ()

    def __init__(self, dom: VectorSpace, cod: VectorSpace, fn: Callable, cat=None):
        check_space(dom, cod)
        if dom.field is not cod.field:
            raise ValueError(f"LinMap {dom!r} -> {cod!r} mixes scalar fields")
        super().__init__(dom, cod, fn, cat if cat is not None else LINMAP)

    def __call__(self, x):
        return as_fun(self)(x)


def as_fun(f: LinMap) -> Callable:
    """The function a -> b a linear map denotes."""
    dom, cod, fn = f.dom, f.cod, f.fn

    def apply(x):
        return lin_comb(cod, [(fn(b), s) for b, s in dom.decompose(x).items()])

    return apply


def to_matrix(f: LinMap) -> np.ndarray:
    """
    Matrix of f with rows indexed by cod.basis() and columns by dom.basis().
    """
    rows = f.cod.basis()
    cols = f.dom.basis()
    M = np.zeros((len(rows), len(cols)))
    for j, b in enumerate(cols):
        coeffs = f.cod.decompose(f.fn(b))
        for i, r in enumerate(rows):
            M[i, j] = coeffs.get(r, 0.0)
    return M


class LinMapCategory(Cartesian, Cocartesian, Additive, Scalable,
                     MonoidalI, CartesianI, CocartesianI, HasDot):
    """
    Category of linear maps over one scalar field.

    Pairs are biproducts here, so the naive transpose category is sound over
    it. `answer` is the scalar object used by dot/undot.
    """
    biproduct = True

    def __init__(self, answer: ScalarSpace = SCALAR):
        self.answer = answer

    def __repr__(self):
        return "LinMap" if self.answer == SCALAR else f"LinMap[{self.answer!r}]"

    def __eq__(self, other):
        return isinstance(other, LinMapCategory) and other.answer == self.answer

    def __hash__(self):
        return hash(("LinMap", self.answer))

    def _map(self, dom, cod, fn) -> LinMap:
        return LinMap(dom, cod, fn, self)

    # ----- Category -----
    def id(self, a) -> LinMap:
        self.check_obj(a)
        return self._map(a, a, a.basis_value)

    def compose(self, g: LinMap, f: LinMap) -> LinMap:
        # g . LinMap f = LinMap (asFun g . f)
        self.check_composable(g, f)
        apply_g, ff = as_fun(g), f.fn
        return self._map(f.dom, g.cod, lambda b: apply_g(ff(b)))

    # ----- Additive -----
    def zero(self, a, b) -> LinMap:
        self.check_obj(a, b)
        return self._map(a, b, lambda _: b.zero())

    def add(self, f: LinMap, g: LinMap) -> LinMap:
        if f.dom != g.dom or f.cod != g.cod:
            raise ValueError(f"Cannot add {f!r} and {g!r}")
        cod, ff, gf = f.cod, f.fn, g.fn
        return self._map(f.dom, cod, lambda b: cod.add(ff(b), gf(b)))

    # ----- Monoidal -----
    def cross(self, f: LinMap, g: LinMap) -> LinMap:
        c, d = f.cod, g.cod
        ff, gf = f.fn, g.fn

        def h(b):
            if isinstance(b, Left):
                return (ff(b.value), d.zero())
            return (c.zero(), gf(b.value))

        return self._map(ProductSpace(f.dom, g.dom), ProductSpace(c, d), h)

    # ----- Cartesian -----
    def exl(self, a, b) -> LinMap:
        def h(x):
            return a.basis_value(x.value) if isinstance(x, Left) else a.zero()
        return self._map(ProductSpace(a, b), a, h)

    def exr(self, a, b) -> LinMap:
        def h(x):
            return b.basis_value(x.value) if isinstance(x, Right) else b.zero()
        return self._map(ProductSpace(a, b), b, h)

    def dup(self, a) -> LinMap:
        self.check_obj(a)
        return self._map(a, ProductSpace(a, a),
                         lambda x: (a.basis_value(x), a.basis_value(x)))

    # ----- Cocartesian -----
    def inl(self, a, b) -> LinMap:
        return self._map(a, ProductSpace(a, b), lambda x: (a.basis_value(x), b.zero()))

    def inr(self, a, b) -> LinMap:
        return self._map(b, ProductSpace(a, b), lambda y: (a.zero(), b.basis_value(y)))

    def jam(self, a) -> LinMap:
        # Left and Right basis elements both land on the same basis vector
        return self._map(ProductSpace(a, a), a, lambda x: a.basis_value(x.value))

    # ----- Scalable -----
    def scale(self, s, a) -> LinMap:
        self.check_obj(a)
        return self._map(a, a, lambda x: a.scale(s, a.basis_value(x)))

    # ----- indexed families -----
    def cross_i(self, fs: Sequence[LinMap]) -> LinMap:
        a, b, n = check_family(fs, "cross_i")
        fns = [f.fn for f in fs]

        def h(key):
            i, x = key
            return tuple(fns[i](x) if j == i else b.zero() for j in range(n))

        return self._map(IndexedSpace(a, n), IndexedSpace(b, n), h)

    def ex_i(self, a, n):
        family = IndexedSpace(a, n)

        def project(i):
            return lambda key: a.basis_value(key[1]) if key[0] == i else a.zero()

        return tuple(self._map(family, a, project(i)) for i in range(n))

    def repl_i(self, a, n) -> LinMap:
        return self._map(a, IndexedSpace(a, n),
                         lambda x: tuple(a.basis_value(x) for _ in range(n)))

    def in_i(self, a, n):
        family = IndexedSpace(a, n)

        def inject(i):
            return lambda x: tuple(a.basis_value(x) if j == i else a.zero()
                                   for j in range(n))

        return tuple(self._map(a, family, inject(i)) for i in range(n))

    def jam_i(self, a, n) -> LinMap:
        return self._map(IndexedSpace(a, n), a, lambda key: a.basis_value(key[1]))

    # ----- HasDot -----
    def dot(self, a, v) -> LinMap:
        """The functional <v, .> : a -> answer; missing coefficients count as zero."""
        self.check_obj(a)
        m = a.decompose(v)
        zero = self.answer.zero()
        return self._map(a, self.answer, lambda b: m.get(b, zero))

    def undot(self, a, h: LinMap):
        if h.dom != a or h.cod != self.answer:
            raise ValueError(f"undot expects a map {a!r} -> {self.answer!r}, got {h!r}")
        return compose(a, {b: h.fn(b) for b in a.basis()})


LINMAP = LinMapCategory()


@dataclass(frozen=True)
class LinMapSpace(VectorSpace):
    """
    Linear maps dom -> cod as vectors, so that curried maps are first class.

    Basis elements are pairs (basis of dom, basis of cod); the coefficient of
    (ba, bc) is the bc-coordinate of the image of ba.
    """
    dom: VectorSpace
    cod: VectorSpace

    def __post_init__(self):
        check_space(self.dom, self.cod)

    @property
    def field(self):
        return self.cod.field

    def zero(self):
        return LINMAP.zero(self.dom, self.cod)

    def add(self, f, g):
        return LINMAP.add(f, g)

    def scale(self, s, f):
        cod, ff = self.cod, f.fn
        return LinMap(self.dom, cod, lambda b: cod.scale(s, ff(b)))

    def decompose(self, f):
        return {(ba, bc): c
                for ba in self.dom.basis()
                for bc, c in self.cod.decompose(f.fn(ba)).items()}

    def basis_value(self, b):
        ba, bc = b
        cod = self.cod
        return LinMap(self.dom, cod,
                      lambda x: cod.basis_value(bc) if x == ba else cod.zero())

    def __repr__(self):
        return f"Hom({self.dom!r}, {self.cod!r})"

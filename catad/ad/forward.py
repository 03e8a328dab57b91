# catad/ad/forward.py
"""
Forward-mode AD as a category.

A morphism D k a b is a function  a -> (b, a `k` b): the value together with
its local derivative, itself a morphism of the base category k. Composition
is the chain rule:

    (g . f)(a) = (c, g' . f')   where (b, f') = f(a), (c, g') = g(b)

Every primitive is paired with its exact derivative, so any morphism built
from these combinators returns the exact derivative at the evaluated point.

The base k decides what a derivative is:
    DCategory(LINMAP)                          -> Jacobians as linear maps
    DCategory(ContCategory(SCALAR, LINMAP))    -> reverse mode via CPS
    DCategory(DualPrimeCategory(SCALAR, LINMAP)) -> reverse mode, direct
"""

from __future__ import annotations
from typing import Sequence, Tuple

import numpy as np

from ..core.category import (
    Cartesian, CartesianI, Category, Cocartesian, CocartesianI, FloatingCat,
    Morphism, Monoidal, MonoidalI, Scalable, check_family, require,
)
from ..core.fun import FUN, Fun
from ..core.space import IndexedSpace, ProductSpace, check_scalar


class D(Morphism):
    """Differentiable map; calling it returns (value, derivative)."""
    __slots__ = ()

    def __call__(self, x):
        return self.fn(x)

    def value(self, x):
        return self.fn(x)[0]

    def derivative(self, x) -> Morphism:
        return self.fn(x)[1]


class DCategory(Cartesian, Cocartesian, Scalable, FloatingCat,
                MonoidalI, CartesianI, CocartesianI):
    """
    Forward-mode category over a base category `base`.

    Each operation needs the matching capability of the base (for example
    `exl` needs a Cartesian base, `mul_c` a Cocartesian and Scalable one);
    a missing capability raises TypeError when the morphism is built.
    """

    def __init__(self, base: Category):
        require(base, Category, "DCategory")
        self.base = base

    def __repr__(self):
        return f"D[{self.base!r}]"

    def __eq__(self, other):
        return isinstance(other, DCategory) and other.base == self.base

    def __hash__(self):
        return hash(("D", self.base))

    def _d(self, dom, cod, fn) -> D:
        return D(dom, cod, fn, self)

    def linear(self, f: Fun, f_prime: Morphism) -> D:
        """linearD: a linear map is its own derivative everywhere."""
        ff = f.fn
        return self._d(f.dom, f.cod, lambda a: (ff(a), f_prime))

    # ----- Category -----
    def id(self, a) -> D:
        return self.linear(FUN.id(a), self.base.id(a))

    def compose(self, g: D, f: D) -> D:
        self.check_composable(g, f)
        gf, ff, base = g.fn, f.fn, self.base

        def h(a):
            b, f_prime = ff(a)
            c, g_prime = gf(b)
            return c, base.compose(g_prime, f_prime)

        return self._d(f.dom, g.cod, h)

    # ----- Monoidal -----
    def cross(self, f: D, g: D) -> D:
        require(self.base, Monoidal, "D.cross")
        ff, gf, base = f.fn, g.fn, self.base

        def h(p):
            c, f_prime = ff(p[0])
            d, g_prime = gf(p[1])
            return (c, d), base.cross(f_prime, g_prime)

        return self._d(ProductSpace(f.dom, g.dom), ProductSpace(f.cod, g.cod), h)

    # ----- Cartesian -----
    def exl(self, a, b) -> D:
        require(self.base, Cartesian, "D.exl")
        return self.linear(FUN.exl(a, b), self.base.exl(a, b))

    def exr(self, a, b) -> D:
        require(self.base, Cartesian, "D.exr")
        return self.linear(FUN.exr(a, b), self.base.exr(a, b))

    def dup(self, a) -> D:
        require(self.base, Cartesian, "D.dup")
        return self.linear(FUN.dup(a), self.base.dup(a))

    # ----- Cocartesian: values use inl_f / inr_f / jam_f -----
    def inl(self, a, b) -> D:
        require(self.base, Cocartesian, "D.inl")
        return self.linear(FUN.inl(a, b), self.base.inl(a, b))

    def inr(self, a, b) -> D:
        require(self.base, Cocartesian, "D.inr")
        return self.linear(FUN.inr(a, b), self.base.inr(a, b))

    def jam(self, a) -> D:
        require(self.base, Cocartesian, "D.jam")
        return self.linear(FUN.jam(a), self.base.jam(a))

    # ----- Scalable -----
    def scale(self, s, a) -> D:
        require(self.base, Scalable, "D.scale")
        return self.linear(FUN.scale(s, a), self.base.scale(s, a))

    # ----- NumCat -----
    # negate and add are linear, so only Scalable/Cocartesian is needed from
    # the base, not a numeric base category.
    def negate(self, s) -> D:
        require(self.base, Scalable, "D.negate")
        return self.linear(FUN.negate(s), self.base.scale(-1.0, s))

    def add_c(self, s) -> D:
        require(self.base, Cocartesian, "D.add_c")
        return self.linear(FUN.add_c(s), self.base.jam(s))

    def mul_c(self, s) -> D:
        # d(a*b) = scale b ▽ scale a  :  (da, db) -> b*da + a*db
        require(self.base, Cocartesian, "D.mul_c")
        require(self.base, Scalable, "D.mul_c")
        check_scalar(s, "D.mul_c")
        base = self.base

        def h(p):
            a, b = p
            return a * b, base.join(base.scale(b, s), base.scale(a, s))

        return self._d(ProductSpace(s, s), s, h)

    # ----- FloatingCat -----
    def sin(self, s) -> D:
        require(self.base, Scalable, "D.sin")
        check_scalar(s, "D.sin")
        base = self.base
        return self._d(s, s, lambda a: (np.sin(a), base.scale(np.cos(a), s)))

    def cos(self, s) -> D:
        require(self.base, Scalable, "D.cos")
        check_scalar(s, "D.cos")
        base = self.base
        return self._d(s, s, lambda a: (np.cos(a), base.scale(-np.sin(a), s)))

    def exp(self, s) -> D:
        require(self.base, Scalable, "D.exp")
        check_scalar(s, "D.exp")
        base = self.base

        def h(a):
            e = np.exp(a)
            return e, base.scale(e, s)

        return self._d(s, s, h)

    # ----- indexed families (per-slot rule) -----
    def cross_i(self, fs: Sequence[D]) -> D:
        require(self.base, MonoidalI, "D.cross_i")
        a, b, n = check_family(fs, "cross_i")
        fns, base = [f.fn for f in fs], self.base

        def h(xs):
            # second crossI . unzip . crossI (fmap unD fs)
            results = [f(x) for f, x in zip(fns, xs)]
            return tuple(v for v, _ in results), base.cross_i([d for _, d in results])

        return self._d(IndexedSpace(a, n), IndexedSpace(b, n), h)

    def ex_i(self, a, n) -> Tuple[D, ...]:
        require(self.base, CartesianI, "D.ex_i")
        return tuple(self.linear(f, f_prime)
                     for f, f_prime in zip(FUN.ex_i(a, n), self.base.ex_i(a, n)))

    def repl_i(self, a, n) -> D:
        require(self.base, CartesianI, "D.repl_i")
        return self.linear(FUN.repl_i(a, n), self.base.repl_i(a, n))

    def in_i(self, a, n) -> Tuple[D, ...]:
        require(self.base, CocartesianI, "D.in_i")
        return tuple(self.linear(f, f_prime)
                     for f, f_prime in zip(FUN.in_i(a, n), self.base.in_i(a, n)))

    def jam_i(self, a, n) -> D:
        require(self.base, CocartesianI, "D.jam_i")
        return self.linear(FUN.jam_i(a, n), self.base.jam_i(a, n))


def linear_d(f: Fun, f_prime: Morphism) -> D:
    """D morphism over f_prime's category whose derivative is f_prime everywhere."""
    return DCategory(f_prime.cat).linear(f, f_prime)

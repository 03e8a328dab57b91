# catad/core/fun.py
"""
The plain-function category: morphisms are Python callables on vectors.

This is the value layer of forward mode (D pairs a Fun value with a
derivative) and the function layer of reverse mode (DualPrime stores a
cotangent pull-back as a plain function). Its sum structure only exists on
additive objects:

    inl_f a      = (a, 0)
    inr_f b      = (0, b)
    jam_f (a, b) = a + b

which is why Fun is not a biproduct category even though it is Cartesian and
Cocartesian.
"""

from __future__ import annotations
from functools import reduce
from operator import itemgetter
from typing import Sequence

import numpy as np

from .category import (
    Additive, Cartesian, CartesianI, Cocartesian, CocartesianI, FloatingCat,
    Morphism, MonoidalI, Scalable, check_family,
)
from .space import IndexedSpace, ProductSpace, VectorSpace, check_scalar


class Fun(Morphism):
    """A function dom -> cod."""
    __slots__ = ()

    def __init__(self, dom, cod, fn, cat=None):
        super().__init__(dom, cod, fn, cat if cat is not None else FUN)

    def __call__(self, x):
        return self.fn(x)


class FunCategory(Cartesian, Cocartesian, Additive, Scalable, FloatingCat,
                  MonoidalI, CartesianI, CocartesianI):

    def __repr__(self):
        return "Fun"

    # ----- Category -----
    def id(self, a: VectorSpace) -> Fun:
        self.check_obj(a)
        return Fun(a, a, lambda x: x, self)

    def compose(self, g: Fun, f: Fun) -> Fun:
        self.check_composable(g, f)
        gf, ff = g.fn, f.fn
        return Fun(f.dom, g.cod, lambda x: gf(ff(x)), self)

    # ----- Monoidal -----
    def cross(self, f: Fun, g: Fun) -> Fun:
        ff, gf = f.fn, g.fn
        return Fun(ProductSpace(f.dom, g.dom), ProductSpace(f.cod, g.cod),
                   lambda p: (ff(p[0]), gf(p[1])), self)

    # ----- Cartesian -----
    def exl(self, a, b) -> Fun:
        return Fun(ProductSpace(a, b), a, itemgetter(0), self)

    def exr(self, a, b) -> Fun:
        return Fun(ProductSpace(a, b), b, itemgetter(1), self)

    def dup(self, a) -> Fun:
        self.check_obj(a)
        return Fun(a, ProductSpace(a, a), lambda x: (x, x), self)

    # ----- Cocartesian (inl_f / inr_f / jam_f) -----
    def inl(self, a, b) -> Fun:
        return Fun(a, ProductSpace(a, b), lambda x: (x, b.zero()), self)

    def inr(self, a, b) -> Fun:
        return Fun(b, ProductSpace(a, b), lambda y: (a.zero(), y), self)

    def jam(self, a) -> Fun:
        return Fun(ProductSpace(a, a), a, lambda p: a.add(p[0], p[1]), self)

    # ----- Additive -----
    def zero(self, a, b) -> Fun:
        self.check_obj(a, b)
        return Fun(a, b, lambda _: b.zero(), self)

    def add(self, f: Fun, g: Fun) -> Fun:
        if f.dom != g.dom or f.cod != g.cod:
            raise ValueError(f"Cannot add {f!r} and {g!r}")
        cod, ff, gf = f.cod, f.fn, g.fn
        return Fun(f.dom, cod, lambda x: cod.add(ff(x), gf(x)), self)

    # ----- Scalable -----
    def scale(self, s, a) -> Fun:
        self.check_obj(a)
        return Fun(a, a, lambda x: a.scale(s, x), self)

    # ----- NumCat / FloatingCat -----
    def negate(self, s) -> Fun:
        check_scalar(s, "negate")
        return Fun(s, s, lambda x: -x, self)

    def add_c(self, s) -> Fun:
        check_scalar(s, "add_c")
        return Fun(ProductSpace(s, s), s, lambda p: p[0] + p[1], self)

    def mul_c(self, s) -> Fun:
        check_scalar(s, "mul_c")
        return Fun(ProductSpace(s, s), s, lambda p: p[0] * p[1], self)

    def sin(self, s) -> Fun:
        check_scalar(s, "sin")
        return Fun(s, s, np.sin, self)

    def cos(self, s) -> Fun:
        check_scalar(s, "cos")
        return Fun(s, s, np.cos, self)

    def exp(self, s) -> Fun:
        check_scalar(s, "exp")
        return Fun(s, s, np.exp, self)

    # ----- indexed families -----
    def cross_i(self, fs: Sequence[Fun]) -> Fun:
        a, b, n = check_family(fs, "cross_i")
        fns = [f.fn for f in fs]
        return Fun(IndexedSpace(a, n), IndexedSpace(b, n),
                   lambda xs: tuple(f(x) for f, x in zip(fns, xs)), self)

    def ex_i(self, a, n):
        family = IndexedSpace(a, n)
        return tuple(Fun(family, a, itemgetter(i), self) for i in range(n))

    def repl_i(self, a, n) -> Fun:
        return Fun(a, IndexedSpace(a, n), lambda x: (x,) * n, self)

    def in_i(self, a, n):
        family = IndexedSpace(a, n)

        def inject(i):
            return lambda x: tuple(x if j == i else a.zero() for j in range(n))

        return tuple(Fun(a, family, inject(i), self) for i in range(n))

    def jam_i(self, a, n) -> Fun:
        return Fun(IndexedSpace(a, n), a, lambda xs: reduce(a.add, xs), self)


FUN = FunCategory()

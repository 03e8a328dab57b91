# catad/ad/dual.py
"""
Reverse-mode specialisations of the CPS category.

Dual k a b
    The naive transpose: a morphism a -> b is stored as the base morphism
    b -> a. Products become sums and vice versa (exl = inl, dup = jam, ...).
    Only sound when (,) is a biproduct in k; this is a precondition of the
    construction and is reported with a warning, not enforced.

DualPrime s k a b
    The faithful representation: a plain function b -> a on cotangent
    vectors, equal to  undot . f . dot  for the Cont s k morphism f it comes
    from (`as_dual_prime`). The base must supply dot/undot (HasDot) for the
    answer object s. Every operator below is given by a direct formula; each
    equals as_dual_prime of the corresponding Cont operator:

        id       : undot . id . dot                      = id
        g . f    : undot . f . (dot . undot) . g . dot   = f' . g'
        f >< g   : (undot >< undot) . (f >< g) . (dot >< dot)
        exl      : undot . join . inl_f . dot            = inl_f
        exr      :                                       = inr_f
        dup      : undot . jam_f . unjoin . dot          = jam_f
        inl      : undot . exl . unjoin . dot            = exl
        inr      :                                       = exr
        jam      : undot . join . dup . dot              = dup
        scale s  : undot . (. scale s) . dot             = scale s
"""

from __future__ import annotations
import warnings
from typing import Sequence, Tuple

from ..config import get_config
from ..core.category import (
    Cartesian, CartesianI, Category, Cocartesian, CocartesianI, HasDot,
    Morphism, Monoidal, MonoidalI, Scalable, check_family, require,
)
from ..core.fun import FUN, Fun
from ..core.space import IndexedSpace, ProductSpace, VectorSpace
from .cont import Cont, ContCategory


# ---------------------------------------------------------------------------
# Dual: naive transpose
# ---------------------------------------------------------------------------

class Dual(Morphism):
    """a -> b stored as the base morphism b -> a."""
    __slots__ = ()

    @property
    def transposed(self) -> Morphism:
        return self.fn


class DualCategory(Cartesian, Cocartesian, Scalable,
                   MonoidalI, CartesianI, CocartesianI):

    def __init__(self, base: Category):
        require(base, Monoidal, "DualCategory")
        if not base.biproduct and get_config().warn_non_biproduct:
            warnings.warn(
                f"DualCategory over {base!r}: pairs are not biproducts there, "
                f"so projections and injections of the transpose do not agree"
            )
        self.base = base

    def __repr__(self):
        return f"Dual[{self.base!r}]"

    def __eq__(self, other):
        return isinstance(other, DualCategory) and other.base == self.base

    def __hash__(self):
        return hash(("Dual", self.base))

    def _dual(self, dom, cod, transposed: Morphism) -> Dual:
        return Dual(dom, cod, transposed, self)

    def id(self, a) -> Dual:
        return self._dual(a, a, self.base.id(a))

    def compose(self, g: Dual, f: Dual) -> Dual:
        # Dual g . Dual f = Dual (f . g)
        self.check_composable(g, f)
        return self._dual(f.dom, g.cod, self.base.compose(f.fn, g.fn))

    def cross(self, f: Dual, g: Dual) -> Dual:
        return self._dual(ProductSpace(f.dom, g.dom), ProductSpace(f.cod, g.cod),
                          self.base.cross(f.fn, g.fn))

    # Cartesian structure needs a Cocartesian base
    def exl(self, a, b) -> Dual:
        require(self.base, Cocartesian, "Dual.exl")
        return self._dual(ProductSpace(a, b), a, self.base.inl(a, b))

    def exr(self, a, b) -> Dual:
        require(self.base, Cocartesian, "Dual.exr")
        return self._dual(ProductSpace(a, b), b, self.base.inr(a, b))

    def dup(self, a) -> Dual:
        require(self.base, Cocartesian, "Dual.dup")
        return self._dual(a, ProductSpace(a, a), self.base.jam(a))

    # Cocartesian structure needs a Cartesian base
    def inl(self, a, b) -> Dual:
        require(self.base, Cartesian, "Dual.inl")
        return self._dual(a, ProductSpace(a, b), self.base.exl(a, b))

    def inr(self, a, b) -> Dual:
        require(self.base, Cartesian, "Dual.inr")
        return self._dual(b, ProductSpace(a, b), self.base.exr(a, b))

    def jam(self, a) -> Dual:
        require(self.base, Cartesian, "Dual.jam")
        return self._dual(ProductSpace(a, a), a, self.base.dup(a))

    def scale(self, s, a) -> Dual:
        require(self.base, Scalable, "Dual.scale")
        return self._dual(a, a, self.base.scale(s, a))

    def cross_i(self, fs: Sequence[Dual]) -> Dual:
        require(self.base, MonoidalI, "Dual.cross_i")
        a, b, n = check_family(fs, "cross_i")
        return self._dual(IndexedSpace(a, n), IndexedSpace(b, n),
                          self.base.cross_i([f.fn for f in fs]))

    def ex_i(self, a, n) -> Tuple[Dual, ...]:
        require(self.base, CocartesianI, "Dual.ex_i")
        family = IndexedSpace(a, n)
        return tuple(self._dual(family, a, m) for m in self.base.in_i(a, n))

    def repl_i(self, a, n) -> Dual:
        require(self.base, CocartesianI, "Dual.repl_i")
        return self._dual(a, IndexedSpace(a, n), self.base.jam_i(a, n))

    def in_i(self, a, n) -> Tuple[Dual, ...]:
        require(self.base, CartesianI, "Dual.in_i")
        family = IndexedSpace(a, n)
        return tuple(self._dual(a, family, m) for m in self.base.ex_i(a, n))

    def jam_i(self, a, n) -> Dual:
        require(self.base, CartesianI, "Dual.jam_i")
        return self._dual(IndexedSpace(a, n), a, self.base.repl_i(a, n))


# ---------------------------------------------------------------------------
# DualPrime: cotangent pull-back functions
# ---------------------------------------------------------------------------

class DualPrime(Morphism):
    """a -> b in reverse mode: `fn` maps a cotangent of b to one of a."""
    __slots__ = ()

    def __call__(self, v):
        return self.fn(v)


class DualPrimeCategory(Cartesian, Cocartesian, Scalable,
                        MonoidalI, CartesianI, CocartesianI):

    def __init__(self, s: VectorSpace, base: Category):
        require(base, HasDot, "DualPrimeCategory")
        answer = getattr(base, "answer", s)
        if answer != s:
            raise ValueError(f"{base!r} pairs vectors with {answer!r}, not {s!r}")
        self.s = s
        self.base = base

    def __repr__(self):
        return f"Dual'[{self.s!r}, {self.base!r}]"

    def __eq__(self, other):
        return (isinstance(other, DualPrimeCategory)
                and other.s == self.s and other.base == self.base)

    def __hash__(self):
        return hash(("Dual'", self.s, self.base))

    def _dp(self, dom, cod, fn) -> DualPrime:
        return DualPrime(dom, cod, fn, self)

    def as_dual_prime(self, c: Cont) -> DualPrime:
        """undot . c . dot"""
        base, dom, cod, cf = self.base, c.dom, c.cod, c.fn
        return self._dp(dom, cod, lambda v: base.undot(dom, cf(base.dot(cod, v))))

    # ----- Category -----
    def id(self, a) -> DualPrime:
        self.check_obj(a)
        return self._dp(a, a, lambda v: v)

    def compose(self, g: DualPrime, f: DualPrime) -> DualPrime:
        # Dual' g . Dual' f = Dual' (f . g)
        self.check_composable(g, f)
        gf, ff = g.fn, f.fn
        return self._dp(f.dom, g.cod, lambda v: ff(gf(v)))

    # ----- Monoidal -----
    def cross(self, f: DualPrime, g: DualPrime) -> DualPrime:
        ff, gf = f.fn, g.fn
        return self._dp(ProductSpace(f.dom, g.dom), ProductSpace(f.cod, g.cod),
                        lambda p: (ff(p[0]), gf(p[1])))

    # ----- Cartesian -----
    def exl(self, a, b) -> DualPrime:
        return self._dp(ProductSpace(a, b), a, FUN.inl(a, b).fn)

    def exr(self, a, b) -> DualPrime:
        return self._dp(ProductSpace(a, b), b, FUN.inr(a, b).fn)

    def dup(self, a) -> DualPrime:
        return self._dp(a, ProductSpace(a, a), FUN.jam(a).fn)

    # ----- Cocartesian -----
    def inl(self, a, b) -> DualPrime:
        return self._dp(a, ProductSpace(a, b), FUN.exl(a, b).fn)

    def inr(self, a, b) -> DualPrime:
        return self._dp(b, ProductSpace(a, b), FUN.exr(a, b).fn)

    def jam(self, a) -> DualPrime:
        return self._dp(ProductSpace(a, a), a, FUN.dup(a).fn)

    # ----- Scalable -----
    def scale(self, s, a) -> DualPrime:
        return self._dp(a, a, FUN.scale(s, a).fn)

    # ----- indexed families -----
    def cross_i(self, fs: Sequence[DualPrime]) -> DualPrime:
        a, b, n = check_family(fs, "cross_i")
        pulled = FUN.cross_i([Fun(f.cod, f.dom, f.fn) for f in fs])
        return self._dp(IndexedSpace(a, n), IndexedSpace(b, n), pulled.fn)

    def ex_i(self, a, n) -> Tuple[DualPrime, ...]:
        family = IndexedSpace(a, n)
        return tuple(self._dp(family, a, m.fn) for m in FUN.in_i(a, n))

    def repl_i(self, a, n) -> DualPrime:
        return self._dp(a, IndexedSpace(a, n), FUN.jam_i(a, n).fn)

    def in_i(self, a, n) -> Tuple[DualPrime, ...]:
        family = IndexedSpace(a, n)
        return tuple(self._dp(a, family, m.fn) for m in FUN.ex_i(a, n))

    def jam_i(self, a, n) -> DualPrime:
        return self._dp(IndexedSpace(a, n), a, FUN.repl_i(a, n).fn)


def as_dual_prime(c: Cont) -> DualPrime:
    """Canonical embedding of a Cont s k morphism into Dual' s k."""
    cat = c.cat
    if not isinstance(cat, ContCategory):
        raise TypeError(f"as_dual_prime expects a Cont morphism, got {c!r}")
    return DualPrimeCategory(cat.r, cat.base).as_dual_prime(c)

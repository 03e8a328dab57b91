# catad/ad/begin.py
"""
Begin: the CPS transform from a fixed source object.

A morphism Begin r k a b maps morphisms r -> a to morphisms r -> b:

    begin(f) = Begin (h -> f . h)

Unlike Cont, products are handled with the base's own product structure
(fork/unfork), because the source r stays fixed while outputs are paired:

    f >< g = fork . (f >< g) . unfork
"""

from __future__ import annotations

from ..core.category import (
    Cartesian, Category, Cocartesian, Morphism, Scalable, require,
)
from ..core.space import ProductSpace, VectorSpace


class Begin(Morphism):
    """`fn` takes a morphism r -> dom to one r -> cod."""
    __slots__ = ()

    def __call__(self, h: Morphism) -> Morphism:
        return self.cat.apply(self, h)


class BeginCategory(Cartesian, Cocartesian, Scalable):

    def __init__(self, r: VectorSpace, base: Category):
        require(base, Category, "BeginCategory")
        base.check_obj(r)
        self.r = r
        self.base = base

    def __repr__(self):
        return f"Begin[{self.r!r}, {self.base!r}]"

    def __eq__(self, other):
        return (isinstance(other, BeginCategory)
                and other.r == self.r and other.base == self.base)

    def __hash__(self):
        return hash(("Begin", self.r, self.base))

    def _begin(self, dom, cod, fn) -> Begin:
        return Begin(dom, cod, fn, self)

    def embed(self, f: Morphism) -> Begin:
        """begin f = Begin (f .)"""
        base = self.base
        return self._begin(f.dom, f.cod, lambda h: base.compose(f, h))

    def apply(self, b: Begin, h: Morphism) -> Morphism:
        """Run b on a source morphism h : r -> dom."""
        if h.dom != self.r or h.cod != b.dom:
            raise ValueError(
                f"Source for {b!r} must be {self.r!r} -> {b.dom!r}, got {h!r}"
            )
        return b.fn(h)

    # ----- Category -----
    def id(self, a) -> Begin:
        self.check_obj(a)
        return self._begin(a, a, lambda h: h)

    def compose(self, g: Begin, f: Begin) -> Begin:
        # Begin g . Begin f = Begin (g . f)
        self.check_composable(g, f)
        gf, ff = g.fn, f.fn
        return self._begin(f.dom, g.cod, lambda h: gf(ff(h)))

    # ----- Monoidal -----
    def cross(self, f: Begin, g: Begin) -> Begin:
        require(self.base, Cartesian, "Begin.cross")
        ff, gf, base = f.fn, g.fn, self.base

        def h(k):
            k1, k2 = base.unfork(k)
            return base.fork(ff(k1), gf(k2))

        return self._begin(ProductSpace(f.dom, g.dom), ProductSpace(f.cod, g.cod), h)

    # ----- Cartesian -----
    def exl(self, a, b) -> Begin:
        require(self.base, Cartesian, "Begin.exl")
        return self.embed(self.base.exl(a, b))

    def exr(self, a, b) -> Begin:
        require(self.base, Cartesian, "Begin.exr")
        return self.embed(self.base.exr(a, b))

    def dup(self, a) -> Begin:
        require(self.base, Cartesian, "Begin.dup")
        return self.embed(self.base.dup(a))

    # ----- Cocartesian -----
    def inl(self, a, b) -> Begin:
        require(self.base, Cocartesian, "Begin.inl")
        return self.embed(self.base.inl(a, b))

    def inr(self, a, b) -> Begin:
        require(self.base, Cocartesian, "Begin.inr")
        return self.embed(self.base.inr(a, b))

    def jam(self, a) -> Begin:
        require(self.base, Cocartesian, "Begin.jam")
        return self.embed(self.base.jam(a))

    # ----- Scalable -----
    def scale(self, s, a) -> Begin:
        require(self.base, Scalable, "Begin.scale")
        return self.embed(self.base.scale(s, a))


def begin(f: Morphism, r: VectorSpace) -> Begin:
    """Embed f : a -> b of its own category as Begin r k a b."""
    return BeginCategory(r, f.cat).embed(f)

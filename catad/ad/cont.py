# catad/ad/cont.py
"""
Continuation-passing transform of a category.

A morphism Cont r k a b maps continuations of its output to continuations of
its input:

    (b `k` r) -> (a `k` r)

Only images of real morphisms under `cont` are meaningful:

    cont(f) = Cont (h -> h . f)

and the category laws cont(id) == id, cont(g . f) == cont(g) . cont(f)
follow from associativity in k. Note the order flip: Cont g . Cont f runs
g's transformer first.

Cross-dependency on the base: splitting a continuation on (b, d) into one on
b and one on d is done with join/unjoin, i.e. with the base's *sum*
structure (inl, inr, jam) plus addition of morphisms into r. The base does
not need to be Cartesian. Correspondingly the product operators here are
built from the base's sum operators and the sum operators from its product
of continuations:

    exl = join . inl_f        inl = exl . unjoin
    exr = join . inr_f        inr = exr . unjoin
    dup = jam_f . unjoin      jam = join . dup
    f >< g = join . (f >< g) . unjoin

The exl/exr/dup equations hold when (,) is a biproduct in k.
"""

from __future__ import annotations

from ..core.category import (
    Additive, Cartesian, Category, Cocartesian, Morphism, Scalable, require,
)
from ..core.space import ProductSpace, VectorSpace


class Cont(Morphism):
    """CPS morphism; `fn` takes a continuation cod -> r to one dom -> r."""
    __slots__ = ()

    def __call__(self, h: Morphism) -> Morphism:
        return self.cat.apply(self, h)


class ContCategory(Cartesian, Cocartesian, Scalable):

    def __init__(self, r: VectorSpace, base: Category):
        require(base, Cocartesian, "ContCategory")
        require(base, Additive, "ContCategory")
        base.check_obj(r)
        self.r = r
        self.base = base

    def __repr__(self):
        return f"Cont[{self.r!r}, {self.base!r}]"

    def __eq__(self, other):
        return (isinstance(other, ContCategory)
                and other.r == self.r and other.base == self.base)

    def __hash__(self):
        return hash(("Cont", self.r, self.base))

    def _cont(self, dom, cod, fn) -> Cont:
        return Cont(dom, cod, fn, self)

    def embed(self, f: Morphism) -> Cont:
        """cont f = Cont (. f)"""
        base = self.base
        return self._cont(f.dom, f.cod, lambda h: base.compose(h, f))

    def apply(self, c: Cont, h: Morphism) -> Morphism:
        """Run c on a continuation h : cod -> r."""
        if h.dom != c.cod or h.cod != self.r:
            raise ValueError(
                f"Continuation for {c!r} must be {c.cod!r} -> {self.r!r}, got {h!r}"
            )
        return c.fn(h)

    # ----- Category -----
    def id(self, a) -> Cont:
        self.check_obj(a)
        return self._cont(a, a, lambda h: h)

    def compose(self, g: Cont, f: Cont) -> Cont:
        # Cont g . Cont f = Cont (f . g)
        self.check_composable(g, f)
        gf, ff = g.fn, f.fn
        return self._cont(f.dom, g.cod, lambda h: ff(gf(h)))

    # ----- Monoidal -----
    def cross(self, f: Cont, g: Cont) -> Cont:
        # join . (f >< g) . unjoin
        ff, gf, base = f.fn, g.fn, self.base

        def h(k):
            k1, k2 = base.unjoin(k)
            return base.join(ff(k1), gf(k2))

        return self._cont(ProductSpace(f.dom, g.dom), ProductSpace(f.cod, g.cod), h)

    # ----- Cartesian (from the base's sum structure) -----
    def exl(self, a, b) -> Cont:
        base, r = self.base, self.r
        return self._cont(ProductSpace(a, b), a,
                          lambda h: base.join(h, base.zero(b, r)))

    def exr(self, a, b) -> Cont:
        base, r = self.base, self.r
        return self._cont(ProductSpace(a, b), b,
                          lambda h: base.join(base.zero(a, r), h))

    def dup(self, a) -> Cont:
        base = self.base

        def h(k):
            k1, k2 = base.unjoin(k)
            return base.add(k1, k2)

        return self._cont(a, ProductSpace(a, a), h)

    # ----- Cocartesian -----
    def inl(self, a, b) -> Cont:
        base = self.base
        return self._cont(a, ProductSpace(a, b), lambda h: base.unjoin(h)[0])

    def inr(self, a, b) -> Cont:
        base = self.base
        return self._cont(b, ProductSpace(a, b), lambda h: base.unjoin(h)[1])

    def jam(self, a) -> Cont:
        base = self.base
        return self._cont(ProductSpace(a, a), a, lambda h: base.join(h, h))

    # ----- Scalable -----
    def scale(self, s, a) -> Cont:
        require(self.base, Scalable, "Cont.scale")
        return self.embed(self.base.scale(s, a))


def cont(f: Morphism, r: VectorSpace) -> Cont:
    """Embed f : a -> b of its own category as Cont r k a b."""
    return ContCategory(r, f.cat).embed(f)

# catad/core/category.py
"""
Minimal categorical vocabulary, written as capability interfaces.

A *category object* (an instance of one of the classes below) plays the role
of a type-class dictionary: generic code receives it alongside the data and
only calls the operations of the interfaces it needs.

    Category      id, compose
    Monoidal      cross                (f >< g)
    Cartesian     exl, exr, dup        derived: fork (f △ g), unfork
    Cocartesian   inl, inr, jam        derived: join (f ▽ g), unjoin
    Additive      zero, add            (on morphisms a -> b)
    Scalable      scale
    NumCat        negate, add_c, mul_c
    FloatingCat   sin, cos, exp
    MonoidalI     cross_i              (indexed families, see IndexedSpace)
    CartesianI    ex_i, repl_i
    CocartesianI  in_i, jam_i
    HasDot        dot, undot           (vector <-> morphism into the answer space)

Objects are VectorSpace descriptors. A missing capability is reported when a
morphism is constructed, never later while it runs.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence, Tuple

from .space import IndexedSpace, ProductSpace, VectorSpace


class Morphism:
    """
    A morphism dom -> cod of some category.

    `fn` is the whole representation; its meaning depends on the category
    (a basis map for LinMap, a CPS transformer for Cont, ...). `cat` is the
    category object that built it, so `g @ f` composes in that category.
    """
    __slots__ = ("dom", "cod", "fn", "cat")

    def __init__(self, dom: VectorSpace, cod: VectorSpace, fn: Callable, cat: "Category"):
        self.dom = dom
        self.cod = cod
        self.fn = fn
        self.cat = cat

    def __matmul__(self, other: "Morphism") -> "Morphism":
        return self.cat.compose(self, other)

    def __repr__(self):
        return f"{type(self).__name__}({self.dom!r} -> {self.cod!r})"


def require(cat, capability: type, op: str):
    """Raise TypeError unless `cat` implements `capability` (needed by `op`)."""
    if not isinstance(cat, capability):
        raise TypeError(
            f"{cat!r} does not provide {capability.__name__}, which {op} requires"
        )


def product_factors(space: VectorSpace, what: str) -> Tuple[VectorSpace, VectorSpace]:
    if not isinstance(space, ProductSpace):
        raise ValueError(f"{what} expects a product object, got {space!r}")
    return space.left, space.right


def indexed_shape(space: VectorSpace, what: str) -> Tuple[VectorSpace, int]:
    if not isinstance(space, IndexedSpace):
        raise ValueError(f"{what} expects an indexed object, got {space!r}")
    return space.space, space.n


class Category(ABC):
    # True when the pair object is a biproduct (products and coproducts agree)
    biproduct = False

    @abstractmethod
    def id(self, a: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def compose(self, g: Morphism, f: Morphism) -> Morphism:
        """g . f"""
        ...

    def is_obj(self, a) -> bool:
        return isinstance(a, VectorSpace)

    def check_obj(self, *objs):
        for a in objs:
            if not self.is_obj(a):
                raise TypeError(f"{a!r} is not an object of {self!r}")

    def check_composable(self, g: Morphism, f: Morphism):
        if g.dom != f.cod:
            raise ValueError(
                f"Cannot compose {g!r} after {f!r}: {g.dom!r} != {f.cod!r}"
            )

    def chain(self, *fs: Morphism) -> Morphism:
        """chain(h, g, f) == h . g . f"""
        return fs[0] if len(fs) == 1 else self.compose(fs[0], self.chain(*fs[1:]))


class Monoidal(Category):
    @abstractmethod
    def cross(self, f: Morphism, g: Morphism) -> Morphism:
        """f >< g : (a, c) -> (b, d)"""
        ...

    def first(self, f: Morphism, b: VectorSpace) -> Morphism:
        return self.cross(f, self.id(b))

    def second(self, a: VectorSpace, g: Morphism) -> Morphism:
        return self.cross(self.id(a), g)


class Cartesian(Monoidal):
    @abstractmethod
    def exl(self, a: VectorSpace, b: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def exr(self, a: VectorSpace, b: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def dup(self, a: VectorSpace) -> Morphism:
        ...

    def fork(self, f: Morphism, g: Morphism) -> Morphism:
        """f △ g = (f >< g) . dup"""
        return self.compose(self.cross(f, g), self.dup(f.dom))

    def unfork(self, h: Morphism) -> Tuple[Morphism, Morphism]:
        """h : a -> (b, c)  gives  (exl . h, exr . h)"""
        b, c = product_factors(h.cod, "unfork")
        return self.compose(self.exl(b, c), h), self.compose(self.exr(b, c), h)


class Cocartesian(Monoidal):
    @abstractmethod
    def inl(self, a: VectorSpace, b: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def inr(self, a: VectorSpace, b: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def jam(self, a: VectorSpace) -> Morphism:
        ...

    def join(self, f: Morphism, g: Morphism) -> Morphism:
        """f ▽ g = jam . (f >< g)"""
        return self.compose(self.jam(f.cod), self.cross(f, g))

    def unjoin(self, h: Morphism) -> Tuple[Morphism, Morphism]:
        """h : (a, b) -> c  gives  (h . inl, h . inr)"""
        a, b = product_factors(h.dom, "unjoin")
        return self.compose(h, self.inl(a, b)), self.compose(h, self.inr(a, b))


class Additive(ABC):
    """Additive structure on the morphisms a -> b of a category."""

    @abstractmethod
    def zero(self, a: VectorSpace, b: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def add(self, f: Morphism, g: Morphism) -> Morphism:
        ...


class Scalable(ABC):
    @abstractmethod
    def scale(self, s: Any, a: VectorSpace) -> Morphism:
        ...


class NumCat(ABC):
    @abstractmethod
    def negate(self, s: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def add_c(self, s: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def mul_c(self, s: VectorSpace) -> Morphism:
        ...


class FloatingCat(NumCat):
    @abstractmethod
    def sin(self, s: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def cos(self, s: VectorSpace) -> Morphism:
        ...

    @abstractmethod
    def exp(self, s: VectorSpace) -> Morphism:
        ...


class MonoidalI(ABC):
    @abstractmethod
    def cross_i(self, fs: Sequence[Morphism]) -> Morphism:
        """Apply fs[i] to slot i: a^n -> b^n."""
        ...


class CartesianI(ABC):
    @abstractmethod
    def ex_i(self, a: VectorSpace, n: int) -> Tuple[Morphism, ...]:
        """One projection a^n -> a per slot."""
        ...

    @abstractmethod
    def repl_i(self, a: VectorSpace, n: int) -> Morphism:
        """a -> a^n, copy into every slot."""
        ...


class CocartesianI(ABC):
    @abstractmethod
    def in_i(self, a: VectorSpace, n: int) -> Tuple[Morphism, ...]:
        """One injection a -> a^n per slot."""
        ...

    @abstractmethod
    def jam_i(self, a: VectorSpace, n: int) -> Morphism:
        """a^n -> a, sum of all slots."""
        ...


class HasDot(ABC):
    """
    Pairing with a fixed answer space s: every vector v of a is turned into
    the morphism a -> s it induces (dot) and back (undot).
    undot(a, dot(a, v)) == v.
    """

    @abstractmethod
    def dot(self, a: VectorSpace, v) -> Morphism:
        ...

    @abstractmethod
    def undot(self, a: VectorSpace, h: Morphism):
        ...


def check_family(fs: Sequence[Morphism], what: str) -> Tuple[VectorSpace, VectorSpace, int]:
    """All morphisms of an indexed family must share dom and cod."""
    fs = tuple(fs)
    if not fs:
        raise ValueError(f"{what} needs at least one morphism")
    a, b = fs[0].dom, fs[0].cod
    for f in fs[1:]:
        if f.dom != a or f.cod != b:
            raise ValueError(f"{what} expects morphisms {a!r} -> {b!r}, got {f!r}")
    return a, b, len(fs)

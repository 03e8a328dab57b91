import numpy as np
import pytest

from catad.core.category import Cartesian, Cocartesian, HasDot, require
from catad.core.fun import FUN, Fun
from catad.core.space import SCALAR, IndexedSpace, ProductSpace


def test_function_category_basics(pair):
    f = FUN.sin(SCALAR)
    g = FUN.exp(SCALAR)
    assert isinstance(f, Fun)
    assert (g @ f)(0.5) == pytest.approx(np.exp(np.sin(0.5)))
    assert FUN.id(pair)((1.0, 2.0)) == (1.0, 2.0)
    assert FUN.chain(FUN.negate(SCALAR), g, f)(0.5) == pytest.approx(-np.exp(np.sin(0.5)))
    with pytest.raises(ValueError):
        FUN.compose(FUN.exl(SCALAR, SCALAR), f)


def test_sums_use_vector_addition(pair):
    nested = ProductSpace(pair, SCALAR)
    assert FUN.inl(pair, SCALAR)((1.0, 2.0)) == ((1.0, 2.0), 0.0)
    assert FUN.inr(pair, SCALAR)(3.0) == ((0.0, 0.0), 3.0)
    assert FUN.jam(pair)(((1.0, 2.0), (3.0, 4.0))) == (4.0, 6.0)
    assert FUN.fork(FUN.sin(SCALAR), FUN.cos(SCALAR))(0.0) == (0.0, 1.0)
    assert FUN.join(FUN.exl(SCALAR, SCALAR), FUN.id(SCALAR))(((1.0, 2.0), 3.0)) == 4.0
    assert nested.dim() == 3


def test_numeric_primitives():
    assert FUN.add_c(SCALAR)((2.0, 3.0)) == 5.0
    assert FUN.mul_c(SCALAR)((2.0, 3.0)) == 6.0
    assert FUN.scale(2.0, SCALAR)(4.0) == 8.0
    assert FUN.add(FUN.sin(SCALAR), FUN.cos(SCALAR))(0.0) == 1.0
    assert FUN.zero(SCALAR, SCALAR)(5.0) == 0.0


def test_indexed_functions():
    fam = IndexedSpace(SCALAR, 2)
    f = FUN.cross_i([FUN.exp(SCALAR), FUN.negate(SCALAR)])
    assert f.dom == fam
    assert f((0.0, 2.0)) == (1.0, -2.0)
    assert FUN.jam_i(SCALAR, 2)((1.5, 2.5)) == 4.0
    assert FUN.repl_i(SCALAR, 2)(1.0) == (1.0, 1.0)
    assert [p((7.0, 8.0)) for p in FUN.ex_i(SCALAR, 2)] == [7.0, 8.0]
    assert FUN.in_i(SCALAR, 2)[1](7.0) == (0.0, 7.0)


def test_capabilities():
    require(FUN, Cartesian, "fork")
    require(FUN, Cocartesian, "join")
    assert not FUN.biproduct
    with pytest.raises(TypeError, match="HasDot"):
        require(FUN, HasDot, "dot")
    with pytest.raises(TypeError):
        FUN.id("R")


def test_numeric_primitives_need_scalar_objects(pair):
    with pytest.raises(TypeError, match="add_c"):
        FUN.add_c(pair)
    with pytest.raises(TypeError, match="mul_c"):
        FUN.mul_c(pair)
    with pytest.raises(TypeError, match="negate"):
        FUN.negate(IndexedSpace(SCALAR, 2))
    with pytest.raises(TypeError, match="exp"):
        FUN.exp(pair)


def test_join_of_injections_is_identity(pair):
    f = FUN.join(FUN.inl(SCALAR, pair), FUN.inr(SCALAR, pair))
    ident = FUN.id(ProductSpace(SCALAR, pair))
    assert f.dom == ident.dom and f.cod == ident.cod
    for x in [(1.0, (2.0, 3.0)), (-0.5, (0.0, 4.0))]:
        assert f(x) == ident(x)

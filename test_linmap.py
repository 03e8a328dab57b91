"""
Tests for linear maps over a basis: evaluation, category laws, the
biproduct structure, indexed families and the dot/undot pairing.
"""

import numpy as np
import pytest

from catad.core.space import SCALAR, IndexedSpace, Left, ProductSpace, Right, compose
from catad.vector.linmap import LINMAP, LinMap, LinMapSpace, as_fun, to_matrix


def same_map(f, g, random_vector, trials=5):
    assert f.dom == g.dom and f.cod == g.cod
    for _ in range(trials):
        x = random_vector(f.dom)
        assert f.cod.allclose(f(x), g(x))
    return True


def test_evaluation_is_linear_combination(pair):
    f = LinMap(pair, SCALAR, lambda b: 2.0 if isinstance(b, Left) else 3.0)
    assert f((2.0, 1.0)) == pytest.approx(7.0)
    assert as_fun(f)((1.0, -1.0)) == pytest.approx(-1.0)
    np.testing.assert_allclose(to_matrix(f), [[2.0, 3.0]])


def test_category_laws(space, random_linmap, random_vector):
    f = random_linmap(space, space)
    g = random_linmap(space, SCALAR)
    h = random_linmap(SCALAR, space)
    ident = LINMAP.id(space)
    assert same_map(LINMAP.compose(ident, f), f, random_vector)
    assert same_map(LINMAP.compose(f, ident), f, random_vector)
    assert same_map(LINMAP.compose(LINMAP.compose(h, g), f),
                    LINMAP.compose(h, LINMAP.compose(g, f)), random_vector)
    # @ composes in the map's own category
    assert same_map(g @ f, LINMAP.compose(g, f), random_vector)


def test_composition_matches_matrix_product(pair, random_linmap):
    f = random_linmap(pair, IndexedSpace(SCALAR, 3))
    g = random_linmap(IndexedSpace(SCALAR, 3), pair)
    np.testing.assert_allclose(to_matrix(g @ f), to_matrix(g) @ to_matrix(f))


def test_compose_rejects_mismatched_objects(pair, random_linmap):
    f = random_linmap(pair, SCALAR)
    with pytest.raises(ValueError):
        LINMAP.compose(f, f)


def test_mixed_fields_rejected():
    from catad.core.space import ScalarSpace
    with pytest.raises(ValueError):
        LinMap(SCALAR, ScalarSpace(np.float32), lambda b: 1.0)


def test_projections_and_injections(pair):
    x = (2.0, 5.0)
    assert LINMAP.exl(SCALAR, SCALAR)(x) == 2.0
    assert LINMAP.exr(SCALAR, SCALAR)(x) == 5.0
    assert LINMAP.dup(SCALAR)(4.0) == (4.0, 4.0)
    assert LINMAP.inl(SCALAR, SCALAR)(3.0) == (3.0, 0.0)
    assert LINMAP.inr(SCALAR, SCALAR)(3.0) == (0.0, 3.0)
    assert LINMAP.jam(SCALAR)(x) == 7.0
    assert LINMAP.scale(3.0, pair)(x) == (6.0, 15.0)


def test_biproduct_identity(pair, random_vector):
    # inl . exl + inr . exr == id on a biproduct
    a = SCALAR
    lhs = LINMAP.add(LINMAP.compose(LINMAP.inl(a, a), LINMAP.exl(a, a)),
                     LINMAP.compose(LINMAP.inr(a, a), LINMAP.exr(a, a)))
    assert same_map(lhs, LINMAP.id(pair), random_vector)


def test_join_of_injections_is_identity(space, random_vector):
    a, b = space, SCALAR
    f = LINMAP.join(LINMAP.inl(a, b), LINMAP.inr(a, b))
    assert same_map(f, LINMAP.id(ProductSpace(a, b)), random_vector)
    np.testing.assert_allclose(to_matrix(f), np.eye(space.dim() + 1))


def test_fork_join_and_their_inverses(pair, random_linmap, random_vector):
    f = random_linmap(SCALAR, pair)
    g = random_linmap(SCALAR, SCALAR)
    fork = LINMAP.fork(f, g)
    x = 1.7
    assert fork.cod.allclose(fork(x), (f(x), g(x)))
    f2, g2 = LINMAP.unfork(fork)
    assert same_map(f2, f, random_vector)
    assert same_map(g2, g, random_vector)

    p = random_linmap(pair, SCALAR)
    q = random_linmap(SCALAR, SCALAR)
    join = LINMAP.join(p, q)
    v = ((1.0, 2.0), 3.0)
    assert join(v) == pytest.approx(p((1.0, 2.0)) + q(3.0))
    p2, q2 = LINMAP.unjoin(join)
    assert same_map(p2, p, random_vector)
    assert same_map(q2, q, random_vector)


def test_cross(pair, random_linmap):
    f = random_linmap(SCALAR, pair)
    g = random_linmap(pair, SCALAR)
    h = LINMAP.cross(f, g)
    x, y = 0.5, (1.0, -2.0)
    out = h((x, y))
    assert pair.allclose(out[0], f(x))
    assert out[1] == pytest.approx(g(y))
    assert LINMAP.first(f, SCALAR)((x, 4.0))[1] == 4.0
    assert LINMAP.second(SCALAR, g)((x, y))[0] == x


def test_indexed_family_operators(random_linmap):
    fam = IndexedSpace(SCALAR, 3)
    fs = [LINMAP.scale(c, SCALAR) for c in (1.0, 2.0, 3.0)]
    assert LINMAP.cross_i(fs)((1.0, 1.0, 1.0)) == (1.0, 2.0, 3.0)
    assert [p((4.0, 5.0, 6.0)) for p in LINMAP.ex_i(SCALAR, 3)] == [4.0, 5.0, 6.0]
    assert LINMAP.repl_i(SCALAR, 3)(2.0) == (2.0, 2.0, 2.0)
    assert LINMAP.in_i(SCALAR, 3)[1](2.0) == (0.0, 2.0, 0.0)
    assert LINMAP.jam_i(SCALAR, 3)((4.0, 5.0, 6.0)) == 15.0
    assert fam.dim() == 3
    with pytest.raises(ValueError):
        LINMAP.cross_i([])
    with pytest.raises(ValueError):
        LINMAP.cross_i([LINMAP.id(SCALAR), random_linmap(SCALAR, ProductSpace(SCALAR, SCALAR))])


def test_dot_undot_roundtrip(space, random_vector):
    v = random_vector(space)
    functional = LINMAP.dot(space, v)
    assert functional.cod == SCALAR
    assert space.allclose(LINMAP.undot(space, functional), v)
    # <v, x> is the coefficient-wise inner product
    x = random_vector(space)
    dv, dx = space.decompose(v), space.decompose(x)
    assert functional(x) == pytest.approx(sum(dv[b] * dx[b] for b in space.basis()))


def test_undot_rejects_wrong_shape(pair):
    with pytest.raises(ValueError):
        LINMAP.undot(pair, LINMAP.id(pair))


def test_linmap_space(pair, random_linmap, random_vector):
    hom = LinMapSpace(pair, SCALAR)
    assert hom.dim() == 2
    f = random_linmap(pair, SCALAR)
    g = compose(hom, hom.decompose(f))
    assert same_map(f, g, random_vector)
    e = hom.basis_value((Right(()), ()))
    assert e((2.0, 5.0)) == 5.0
    h = hom.add(hom.scale(2.0, f), f)
    x = random_vector(pair)
    assert h(x) == pytest.approx(3.0 * f(x))

# catad/ad/expressions.py
"""
Example expressions written once, generic over the category.

Each builder takes a category object `k` (anything providing the operations
it calls) and the scalar object `s`, and returns a morphism of k. Building at
FUN evaluates, at DCategory(...) differentiates.
"""


def sqr(k, s):
    """x -> x * x"""
    return k.compose(k.mul_c(s), k.dup(s))


def mag_sqr(k, s):
    """(x, y) -> x*x + y*y"""
    return k.compose(k.add_c(s), k.cross(sqr(k, s), sqr(k, s)))


def cos_sin_prod(k, s):
    """(x, y) -> (cos(x*y), sin(x*y))"""
    return k.compose(k.fork(k.cos(s), k.sin(s)), k.mul_c(s))


def exp_scale(k, s, c):
    """x -> exp(c * x)"""
    return k.compose(k.exp(s), k.scale(c, s))


def neg_sin_plus_cos(k, s):
    """x -> -(sin x + cos x)"""
    return k.chain(k.negate(s), k.add_c(s), k.fork(k.sin(s), k.cos(s)))


def sum_sqr(k, s, n):
    """(x_0, ..., x_{n-1}) -> sum of x_i * x_i, through the indexed operators."""
    return k.compose(k.jam_i(s, n), k.cross_i([sqr(k, s)] * n))

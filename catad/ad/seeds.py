# catad/ad/seeds.py

#-----------------------------------------------------------------------------
# Drivers: instantiate a generic expression at a concrete category and run it.
# Reverse mode "plants" a seed (dy/dy = 1) on the scalar output cotangent and
# pulls it back to the input.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Tuple

import numpy as np

from ..core.fun import FUN
from ..core.space import SCALAR, ScalarSpace, VectorSpace
from ..vector.linmap import LinMap, LinMapCategory, to_matrix
from .cont import ContCategory
from .dual import DualPrime, DualPrimeCategory, as_dual_prime
from .forward import DCategory

# An expression builds a morphism from a category object and a scalar object
Expression = Callable[[Any, VectorSpace], Any]

REVERSE_MODES = ("cont", "dual")


def value(expr: Expression, x, s: ScalarSpace = SCALAR):
    """Plain evaluation: the expression instantiated at the function category."""
    return expr(FUN, s)(x)


def derivative(expr: Expression, x, s: ScalarSpace = SCALAR) -> Tuple[Any, LinMap]:
    """Forward mode: value and derivative (a LinMap) at x."""
    return expr(DCategory(LinMapCategory(s)), s)(x)


def jvp(expr: Expression, x, dx, s: ScalarSpace = SCALAR):
    """Value and directional derivative along dx."""
    y, f_prime = derivative(expr, x, s)
    return y, f_prime(dx)


def jacobian(expr: Expression, x, s: ScalarSpace = SCALAR) -> Tuple[Any, np.ndarray]:
    """Value and Jacobian matrix (rows: output basis, columns: input basis)."""
    y, f_prime = derivative(expr, x, s)
    return y, to_matrix(f_prime)


def reverse_derivative(expr: Expression, x, s: ScalarSpace = SCALAR,
                       mode: str = "cont") -> Tuple[Any, DualPrime]:
    """
    Reverse mode: value and the cotangent pull-back at x.

    mode="cont": differentiate in D over Cont s LinMap, then as_dual_prime
    mode="dual": differentiate in D over Dual' s LinMap directly
    """
    base = LinMapCategory(s)
    if mode == "cont":
        y, c = expr(DCategory(ContCategory(s, base)), s)(x)
        return y, as_dual_prime(c)
    if mode == "dual":
        return expr(DCategory(DualPrimeCategory(s, base)), s)(x)
    raise ValueError(f"Unknown reverse mode: {mode!r} (expected one of {REVERSE_MODES})")


def gradient(expr: Expression, x, s: ScalarSpace = SCALAR,
             mode: str = "cont", seed=1.0):
    """
    Value and gradient of a scalar-output expression at x.
    The gradient is a vector of the input space.
    """
    y, back = reverse_derivative(expr, x, s, mode)
    # Expect scalar output
    if back.cod != s:
        raise ValueError("gradient(expr, x) expects scalar output.")
    return y, back(s.field(seed))

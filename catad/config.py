"""
Numeric configuration.

Shared tolerances for comparing vectors and the switch for the non-biproduct
warning raised by the naive transpose category.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class NumericConfig:
    """Configuration for vector comparisons and diagnostics."""
    # Tolerances used by VectorSpace.allclose
    atol: float = 1e-9
    rtol: float = 1e-7

    # Warn when DualCategory is built over a base without true biproducts
    warn_non_biproduct: bool = True


_config = NumericConfig()


def get_config() -> NumericConfig:
    return _config


def set_config(config: NumericConfig = None, **overrides) -> NumericConfig:
    """
    Replace the active configuration and return the previous one.

    Either pass a full NumericConfig or keyword overrides of single fields:
        >>> prev = set_config(atol=1e-12)
        >>> ...
        >>> set_config(prev)
    """
    global _config
    prev = _config
    base = config if config is not None else _config
    _config = replace(base, **overrides) if overrides else base
    return prev

# gpexplorer/num/shared.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Backend-independent helpers for gpexplorer.num."""

import math
from typing import Any, Union

from gpexplorer.config import get_config

Scalar = Union[int, float]
ArrayLike = Any


def get_dtype():
    return get_config().dtype_resolved


def as_vector(x) -> ArrayLike:
    """
    Convert a sequence of scalars to a 1D backend array.

    A single-column 2D array (n, 1) is flattened to (n,). Anything with more
    than one column is returned unchanged so callers can reject it.
    """
    import gpexplorer.num as gnp

    v = gnp.asarray(x)
    if v.ndim == 0:
        return v.reshape(1)
    if v.ndim == 2 and v.shape[1] == 1:
        return v.reshape(-1)
    return v


def is_finite_scalar(value: Scalar) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False

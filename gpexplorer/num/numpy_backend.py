# gpexplorer/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for gpexplorer.

This module defines the NumPy implementation of the gpexplorer.num API.
"""

import builtins
from typing import Any, Union
from gpexplorer.config import _normalize_dtype_spec, get_config, init_backend, get_logger

Scalar = Union[int, float]
ArrayLike = Any

_gpexplorer_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.info("Using backend: %s", _gpexplorer_backend_)
_DTYPE_SPEC = _normalize_dtype_spec(_config.dtype)

_LINALG_ERROR_KEYWORDS = (
    "singular",
    "not positive definite",
    "not positive-definite",
    "cholesky",
    "decomposition",
    "factorization",
    "matrix is not invertible",
    "inverse",
    "ill-conditioned",
    "linalg",
    "lapack",
    "array must not contain infs or nans",
)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy
from numpy.typing import NDArray

_np_dtype = numpy.float32 if _DTYPE_SPEC == "float32" else numpy.float64
_config.dtype_resolved = _np_dtype

ndarray = NDArray[numpy.floating]
from numpy import (
    isfinite,
    diag,
    abs,
    sqrt,
    exp,
    maximum,
    einsum,
    matmul,
    all,
)
from numpy.linalg import inv
from scipy.linalg import cho_factor, cho_solve

# ..................................................


def _is_linalg_exception(exc: Exception) -> bool:
    if isinstance(exc, numpy.linalg.LinAlgError):
        return True
    msg = str(exc).lower()
    return builtins.any(keyword in msg for keyword in _LINALG_ERROR_KEYWORDS)


# ..................................................


def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        return x
    out = numpy.asarray(x)
    if numpy.issubdtype(out.dtype, numpy.number):
        return out.astype(_np_dtype, copy=False)
    return out


def copy(x):
    return numpy.array(x, dtype=_np_dtype, copy=True)


def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)


def full(shape, fill_value, dtype=None):
    return numpy.full(
        shape, fill_value, dtype=_np_dtype if dtype is None else dtype
    )


def eye(n, dtype=None):
    return numpy.eye(n, dtype=_np_dtype if dtype is None else dtype)


def transpose(x, dim0=0, dim1=1):
    return numpy.swapaxes(x, dim0, dim1)


def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start, stop, num, endpoint=endpoint, dtype=_np_dtype if dtype is None else dtype
    )


def to_np(x):
    return numpy.asarray(x)


def to_scalar(x):
    return numpy.asarray(x).item()


# ..................................................


def cholesky_inv(A):
    n = A.shape[0]
    C, lower = cho_factor(A, lower=True, check_finite=True)
    return cho_solve((C, lower), eye(n))

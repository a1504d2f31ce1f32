# gpexplorer/num/torch_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Torch numerical backend for gpexplorer.

This module defines the Torch implementation of the gpexplorer.num API.
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
    "cusolver",
)


# -----------------------------------------------------
#
#                      TORCH
#
# -----------------------------------------------------

import torch
import numpy

_torch_dtype = torch.float32 if _DTYPE_SPEC == "float32" else torch.float64
torch.set_default_dtype(_torch_dtype)
_config.dtype_resolved = _torch_dtype

from torch import is_tensor

ndarray = torch.Tensor

from torch import (
    isfinite,
    diag,
    abs,
    sqrt,
    exp,
    einsum,
    matmul,
)
from torch.linalg import cholesky, inv

# ..................................................

_torch_linalg_error = (
    (torch.linalg.LinAlgError,) if hasattr(torch.linalg, "LinAlgError") else tuple()
)


def _is_linalg_exception(exc: Exception) -> bool:
    if _torch_linalg_error and isinstance(exc, _torch_linalg_error):
        return True
    msg = str(exc).lower()
    return builtins.any(keyword in msg for keyword in _LINALG_ERROR_KEYWORDS)


# ..................................................


def asarray(x, dtype=None):
    if isinstance(x, torch.Tensor):
        if dtype is not None:
            return x if x.dtype == dtype else x.to(dtype=dtype)
        if not x.is_floating_point() or x.dtype != _torch_dtype:
            return x.to(dtype=_torch_dtype)
        return x
    if isinstance(x, numpy.ndarray):
        x_ = torch.from_numpy(numpy.ascontiguousarray(x))
    else:
        x_ = torch.as_tensor(x)
    if dtype is not None:
        return x_ if x_.dtype == dtype else x_.to(dtype=dtype)
    if x_.dtype != _torch_dtype and x_.dtype != torch.bool:
        x_ = x_.to(dtype=_torch_dtype)
    return x_


def copy(x):
    return asarray(x).clone().detach()


def zeros(shape, dtype=None):
    return torch.zeros(shape, dtype=_torch_dtype if dtype is None else dtype)


def ones(shape, dtype=None):
    return torch.ones(shape, dtype=_torch_dtype if dtype is None else dtype)


def full(shape, fill_value, dtype=None):
    return torch.full(shape, fill_value, dtype=_torch_dtype if dtype is None else dtype)


def eye(n, dtype=None):
    return torch.eye(n, dtype=_torch_dtype if dtype is None else dtype)


def transpose(x, dim0=0, dim1=1):
    return torch.transpose(x, dim0, dim1)


def linspace(start, stop, num=50, endpoint=True, dtype=None):
    dtype = _torch_dtype if dtype is None else dtype
    if endpoint:
        return torch.linspace(start, stop, num, dtype=dtype)
    return torch.linspace(start, stop, num + 1, dtype=dtype)[:-1]


def all(x):
    return torch.all(asarray(x, dtype=torch.bool) if not is_tensor(x) else x)


def maximum(x1, x2):
    if torch.is_tensor(x1) and torch.is_tensor(x2):
        return torch.maximum(x1, x2)
    return torch.maximum(asarray(x1), asarray(x2))


def to_np(x):
    if is_tensor(x):
        return x.detach().cpu().numpy()
    return numpy.asarray(x)


def to_scalar(x):
    return x.item()


# ..................................................


def cholesky_inv(A):
    C = cholesky(A)
    return torch.cholesky_inverse(C)

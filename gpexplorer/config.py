# gpexplorer/config.py
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

_BACKENDS = ("numpy", "torch")


def _normalize_dtype_spec(dtype):
    """Map a user dtype spec (python type, string, numpy/torch dtype) to a short name."""
    if dtype is None:
        return "float64"
    s = str(dtype).lower()
    if "float32" in s or "single" in s:
        return "float32"
    if "float64" in s or "double" in s:
        return "float64"
    raise ValueError(f"Unsupported dtype {dtype!r}; use float32 or float64")


class _GPExplorerConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        self.dtype = os.environ.get("GPEXPLORER_DTYPE", "float64")
        self.dtype_resolved = None
        # logger lives in config
        self.logger = logging.getLogger("gpexplorer")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"GPExplorerConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype})"
        )

    def __repr__(self):
        return (
            f"<GPExplorerConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype!r}>"
        )


_config = _GPExplorerConfig()


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("GPEXPLORER_BACKEND")
    if env in _BACKENDS:
        return env
    return "numpy"


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports.

    The backend and the dtype (GPEXPLORER_DTYPE, float64 by default) are
    read from the environment when gpexplorer is first imported.
    """
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["GPEXPLORER_BACKEND"] = backend
    return _config.backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)

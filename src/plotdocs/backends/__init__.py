"""
Backends of the documented graphics library.

Each backend answers capability queries and captures the figures its
examples draw. Importing this package registers the shipped backends in
`backend_registry`.
"""

from plotdocs.backends.base_backend import BaseBackend, CaptureError, SupportLevel
from plotdocs.backends.registry import BackendRegistry, UnknownBackendError, backend_registry
from plotdocs.backends.matplotlib_backend import MatplotlibBackend

__all__ = [
    "BackendRegistry",
    "BaseBackend",
    "CaptureError",
    "MatplotlibBackend",
    "SupportLevel",
    "UnknownBackendError",
    "backend_registry",
]

"""Host metrics reporting service."""
from .api import create_app
from ._version import __version__

__all__ = ["create_app", "__version__"]

"""Network providers for cosmokit."""

from ..providers.base import BaseProvider
from ..providers.http import HTTPProvider

__all__ = ["BaseProvider", "HTTPProvider"]

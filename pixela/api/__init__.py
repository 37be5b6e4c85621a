# pixela/api/__init__.py

# Expose key components for easier import
# Example: from pixela.api import PixelaClient, PixelaAPIError

from .client import PixelaClient, create
from .endpoints import PixelaEndpoints, build_query
from .exception import PixelaAPIError
from .pixela_api import PixelaAPI, PixelaConfig

__all__ = [
    "PixelaAPI",
    "PixelaAPIError",
    "PixelaClient",
    "PixelaConfig",
    "PixelaEndpoints",
    "build_query",
    "create",
]

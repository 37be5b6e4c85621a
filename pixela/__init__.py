# pixela/__init__.py
"""Pixela package initialization.

Client binding for the pixe.la habit-tracking API.
"""

# --- Define Package Metadata ---
__version__ = "1.0.0"

# --- Expose Key Components ---
from .api import PixelaAPI, PixelaAPIError, PixelaClient, PixelaConfig, create
from .models import GraphColor, GraphType

__all__ = [
    "GraphColor",
    "GraphType",
    "PixelaAPI",
    "PixelaAPIError",
    "PixelaClient",
    "PixelaConfig",
    "create",
]

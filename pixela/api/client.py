# pixela/api/client.py

# SECTION: MODULE DOCSTRING
"""Defines the main PixelaClient integrating all API functionalities via mixins."""

# SECTION: IMPORTS
from __future__ import annotations

from typing import Any

from .mixin.graph_mixin import GraphMixin
from .mixin.pixel_mixin import PixelMixin
from .mixin.user_mixin import UserMixin
from .mixin.webhook_mixin import WebhookMixin
from .pixela_api import PixelaAPI

# SECTION: CLIENT CLASS


# KLASS: PixelaClient
class PixelaClient(
    PixelaAPI,  # Base transport first in the MRO
    UserMixin,
    GraphMixin,
    PixelMixin,
    WebhookMixin,
):
    """A full pixe.la client combining the transport with per-resource methods.

    Inherits credentials, URL building and the HTTP verbs from PixelaAPI, and
    the endpoint methods (create_graph, get_pixel, ...) from the mixins.

    Example::

        with PixelaClient("alice", "thisissecret") as pixela:
            pixela.create_pixel("reading", "20240101", 12)
            pixels = pixela.get_graph_pixels("reading", from_date="20240101")
    """


# FUNC: create
def create(username: str, token: str, **kwargs: Any) -> PixelaClient:
    """Build a client for ``username`` authenticated with ``token``."""
    return PixelaClient(username, token, **kwargs)

# pixela/models/__init__.py

# SECTION: MODULE DOCSTRING
"""Pydantic models for pixe.la request payloads and response bodies."""

# SECTION: EXPORTS

# --- Payloads ---
from .payload import (
    GraphColor,
    GraphDefinition,
    GraphType,
    GraphUpdate,
    PixelPayload,
    UserCreate,
    UserUpdate,
    WebhookDefinition,
)

# --- Responses ---
from .response import (
    BasicResponse,
    CreateWebhookResponse,
    GraphPixelsResponse,
    GraphResponse,
    GraphsItem,
    PixelaResponse,
    PixelResponse,
    WebhookResponse,
    WebhooksItem,
)

__all__ = [
    "BasicResponse",
    "CreateWebhookResponse",
    "GraphColor",
    "GraphDefinition",
    "GraphPixelsResponse",
    "GraphResponse",
    "GraphType",
    "GraphUpdate",
    "GraphsItem",
    "PixelPayload",
    "PixelResponse",
    "PixelaResponse",
    "UserCreate",
    "UserUpdate",
    "WebhookDefinition",
    "WebhookResponse",
    "WebhooksItem",
]

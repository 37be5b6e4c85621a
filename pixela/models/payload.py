# pixela/models/payload.py

# SECTION: MODULE DOCSTRING
"""Request bodies sent to pixe.la.

Optional fields default to None and are left out of the encoded body
entirely. Field values are not validated: colors, dates, flags and so on
are forwarded as given and checked by the server.
"""

# SECTION: IMPORTS
from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

# SECTION: ENUMS


# KLASS: GraphType
class GraphType(str, Enum):
    INT = "int"
    FLOAT = "float"


# KLASS: GraphColor
class GraphColor(str, Enum):
    """Graph colors accepted by pixe.la."""

    SHIBAFU = "shibafu"  # green
    MOMIJI = "momiji"  # red
    SORA = "sora"  # blue
    ICHOU = "ichou"  # yellow
    AJISAI = "ajisai"  # purple
    KURO = "kuro"  # black


# SECTION: BASE


# KLASS: PixelaPayloadModel
class PixelaPayloadModel(BaseModel):
    """Base payload; ``to_payload`` drops unset optional fields."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    # FUNC: to_payload
    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# SECTION: USER


# KLASS: UserCreate
class UserCreate(PixelaPayloadModel):
    token: Any
    username: Any
    agree_terms_of_service: Any = Field(..., alias="agreeTermsOfService")
    not_minor: Any = Field(..., alias="notMinor")


# KLASS: UserUpdate
class UserUpdate(PixelaPayloadModel):
    new_token: Any = Field(..., alias="newToken")


# SECTION: GRAPH


# KLASS: GraphDefinition
class GraphDefinition(PixelaPayloadModel):
    id: Any
    name: Any
    unit: Any
    type: Any
    color: Any
    timezone: Any = None
    self_sufficient: Any = Field(None, alias="selfSufficient")


# KLASS: GraphUpdate
class GraphUpdate(PixelaPayloadModel):
    """Sparse graph update keyed by wire names. Any other key is dropped."""

    graph_name: Any = Field(None, alias="graphName")
    unit: Any = None
    type: Any = None
    color: Any = None
    timezone: Any = None
    self_sufficient: Any = Field(None, alias="selfSufficient")

    # FUNC: from_mapping
    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> GraphUpdate:
        """Build an update from wire-named keys only (``graphName``, not ``graph_name``)."""
        wire_names = {field.alias or name for name, field in cls.model_fields.items()}
        return cls.model_validate({key: value for key, value in payload.items() if key in wire_names})


# SECTION: PIXEL


# KLASS: PixelPayload
class PixelPayload(PixelaPayloadModel):
    """Pixel body: quantity goes out as a decimal string, optionalData as a JSON string."""

    date: Any = None  # only set when creating
    quantity: Any
    optional_data: Any = Field(None, alias="optionalData")

    @field_serializer("quantity")
    def _quantity_as_str(self, quantity: Any) -> str:
        return str(quantity)

    @field_serializer("optional_data")
    def _optional_data_as_json(self, optional_data: Any) -> str | None:
        if optional_data is None:
            return None
        return json.dumps(optional_data, separators=(",", ":"), ensure_ascii=False)


# SECTION: WEBHOOK


# KLASS: WebhookDefinition
class WebhookDefinition(PixelaPayloadModel):
    graph_id: Any = Field(..., alias="graphID")
    type: Any

# pixela/api/mixin/pixel_mixin.py

# SECTION: MODULE DOCSTRING
"""Mixin class providing pixe.la Pixel related API methods."""

# SECTION: IMPORTS
from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from pixela.models.payload import PixelPayload
from pixela.models.response import BasicResponse, PixelResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from pixela.api.endpoints import PixelaEndpoints

# SECTION: MIXIN CLASS


# KLASS: PixelMixin
class PixelMixin:
    """Mixin containing methods for reading and writing pixels."""

    if TYPE_CHECKING:
        endpoints: PixelaEndpoints
        get: Callable[..., str]
        post: Callable[..., str]
        put: Callable[..., str]
        delete: Callable[..., str]

    # FUNC: create_pixel
    def create_pixel(
        self,
        graph_id: str,
        date: str,
        quantity: int | float | Decimal,
        optional_data: Any | None = None,
    ) -> BasicResponse:
        """Records a quantity for a date.

        Args:
            graph_id: Target graph.
            date: yyyyMMdd date of the pixel.
            quantity: Value, sent as a decimal string.
            optional_data: Any JSON-serializable value, sent as a JSON string.
        """
        payload = PixelPayload(date=date, quantity=quantity, optional_data=optional_data)
        body = self.post(self.endpoints.graph(graph_id), payload.to_payload())
        return BasicResponse.model_validate_json(body)

    # FUNC: get_pixel
    def get_pixel(self, graph_id: str, date: str) -> PixelResponse:
        body = self.get(self.endpoints.graph_detail(graph_id, date))
        return PixelResponse.model_validate_json(body)

    # FUNC: update_pixel
    def update_pixel(
        self,
        graph_id: str,
        date: str,
        quantity: int | float | Decimal,
        optional_data: Any | None = None,
    ) -> BasicResponse:
        """Replaces the quantity (and optional data) of an existing pixel."""
        payload = PixelPayload(quantity=quantity, optional_data=optional_data)
        body = self.put(self.endpoints.graph_detail(graph_id, date), payload.to_payload())
        return BasicResponse.model_validate_json(body)

    # FUNC: increment_pixel
    def increment_pixel(self, graph_id: str) -> BasicResponse:
        """Adds one unit to today's pixel."""
        body = self.put(self.endpoints.graph_detail(graph_id, "increment"))
        return BasicResponse.model_validate_json(body)

    # FUNC: decrement_pixel
    def decrement_pixel(self, graph_id: str) -> BasicResponse:
        """Subtracts one unit from today's pixel."""
        body = self.put(self.endpoints.graph_detail(graph_id, "decrement"))
        return BasicResponse.model_validate_json(body)

    # FUNC: delete_pixel
    def delete_pixel(self, graph_id: str, date: str) -> BasicResponse:
        body = self.delete(self.endpoints.graph_detail(graph_id, date))
        return BasicResponse.model_validate_json(body)

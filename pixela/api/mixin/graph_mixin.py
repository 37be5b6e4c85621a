# pixela/api/mixin/graph_mixin.py

# SECTION: MODULE DOCSTRING
"""Mixin class providing pixe.la Graph related API methods."""

# SECTION: IMPORTS
from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pixela.api.endpoints import build_query
from pixela.models.payload import GraphDefinition, GraphUpdate
from pixela.models.response import BasicResponse, GraphPixelsResponse, GraphResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from pixela.api.endpoints import PixelaEndpoints

# SECTION: MIXIN CLASS


# KLASS: GraphMixin
class GraphMixin:
    """Mixin containing methods for managing pixe.la graphs."""

    if TYPE_CHECKING:
        endpoints: PixelaEndpoints
        get: Callable[..., str]
        post: Callable[..., str]
        put: Callable[..., str]
        delete: Callable[..., str]

    # FUNC: create_graph
    def create_graph(
        self,
        graph_id: str,
        name: str,
        unit: str,
        type: str,
        color: str,
        timezone: str | None = None,
        self_sufficient: str | None = None,
    ) -> BasicResponse:
        """Creates a new graph.

        Args:
            graph_id: Caller-chosen graph ID, unique per user.
            name: Display name.
            unit: Unit of a pixel's quantity (e.g. ``"commit"``).
            type: ``"int"`` or ``"float"`` (see ``GraphType``).
            color: One of the ``GraphColor`` values.
            timezone: Optional timezone; the server defaults to UTC.
            self_sufficient: Optional ``increment``/``decrement``/``none``.

        Returns:
            The service's status response.
        """
        payload = GraphDefinition(
            id=graph_id,
            name=name,
            unit=unit,
            type=type,
            color=color,
            timezone=timezone,
            self_sufficient=self_sufficient,
        )
        body = self.post(self.endpoints.graphs(), payload.to_payload())
        return BasicResponse.model_validate_json(body)

    # FUNC: get_graphs
    def get_graphs(self) -> GraphResponse:
        """Lists all graph definitions of the user."""
        body = self.get(self.endpoints.graphs())
        return GraphResponse.model_validate_json(body)

    # FUNC: get_svg
    def get_svg(self, graph_id: str, date: str | None = None, mode: str | None = None) -> str:
        """Returns the graph's SVG markup exactly as served.

        Args:
            graph_id: The graph to render.
            date: Optional yyyyMMdd end date of the rendered range.
            mode: Optional display mode (e.g. ``"short"``).
        """
        url = build_query(self.endpoints.graph(graph_id), {"date": date, "mode": mode})
        return self.get(url)

    # FUNC: update_graph
    def update_graph(self, graph_id: str, payload: Mapping[str, Any]) -> BasicResponse:
        """Updates a graph definition.

        Only ``graphName``, ``unit``, ``type``, ``color``, ``timezone`` and
        ``selfSufficient`` are forwarded; other keys are dropped.
        """
        update = GraphUpdate.from_mapping(payload)
        body = self.put(self.endpoints.graph(graph_id), update.to_payload())
        return BasicResponse.model_validate_json(body)

    # FUNC: delete_graph
    def delete_graph(self, graph_id: str) -> BasicResponse:
        body = self.delete(self.endpoints.graph(graph_id))
        return BasicResponse.model_validate_json(body)

    # FUNC: get_graph_pixels
    def get_graph_pixels(
        self,
        graph_id: str,
        from_date: str | None = None,
        to_date: str | None = None,
    ) -> GraphPixelsResponse:
        """Lists the dates holding a pixel, optionally bounded by yyyyMMdd dates."""
        url = build_query(
            self.endpoints.graph_detail(graph_id, "pixels"),
            {"from": from_date, "to": to_date},
        )
        body = self.get(url)
        return GraphPixelsResponse.model_validate_json(body)

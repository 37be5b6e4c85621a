# pixela/api/endpoints.py

# SECTION: MODULE DOCSTRING
"""Builds fully-qualified pixe.la endpoint URLs.

Every URL is ``{base}/{version}/users`` followed by the username and the
resource path. Query strings are assembled from defined values only and are
not percent-encoded.
"""

# SECTION: IMPORTS
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# SECTION: FUNCTIONS


# FUNC: build_query
def build_query(url: str, parameters: Mapping[str, Any]) -> str:
    """Append ``key=value`` pairs for every parameter that is not None.

    Order follows the mapping. Values are inserted verbatim.

    Args:
        url: The URL to extend.
        parameters: Query parameters, ``None`` values are skipped.

    Returns:
        ``url`` unchanged if no parameter is defined, otherwise ``url?k=v&...``.
    """
    params = [f"{key}={value}" for key, value in parameters.items() if value is not None]
    if not params:
        return url
    return f"{url}?{'&'.join(params)}"


# SECTION: ENDPOINTS


# KLASS: PixelaEndpoints
@dataclass(frozen=True)
class PixelaEndpoints:
    """URL factory bound to one host, API version and username."""

    base_url: str
    api_version: str
    username: str

    def __post_init__(self) -> None:
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url[:-1])

    # FUNC: users
    def users(self) -> str:
        return f"{self.base_url}/{self.api_version}/users"

    # FUNC: user
    def user(self) -> str:
        return f"{self.users()}/{self.username}"

    # FUNC: graphs
    def graphs(self) -> str:
        return f"{self.user()}/graphs"

    # FUNC: graph
    def graph(self, graph_id: str) -> str:
        return f"{self.graphs()}/{graph_id}"

    # FUNC: graph_detail
    def graph_detail(self, graph_id: str, detail: str) -> str:
        """Graph sub-resource: ``pixels``, ``increment``, ``decrement`` or a yyyyMMdd date."""
        return f"{self.graph(graph_id)}/{detail}"

    # FUNC: webhooks
    def webhooks(self) -> str:
        return f"{self.user()}/webhooks"

    # FUNC: webhook
    def webhook(self, webhook_hash: str) -> str:
        return f"{self.webhooks()}/{webhook_hash}"

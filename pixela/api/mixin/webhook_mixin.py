# pixela/api/mixin/webhook_mixin.py

# SECTION: MODULE DOCSTRING
"""Mixin class providing pixe.la Webhook related API methods."""

# SECTION: IMPORTS
from __future__ import annotations

from typing import TYPE_CHECKING

from pixela.models.payload import WebhookDefinition
from pixela.models.response import BasicResponse, CreateWebhookResponse, WebhookResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from pixela.api.endpoints import PixelaEndpoints

# SECTION: MIXIN CLASS


# KLASS: WebhookMixin
class WebhookMixin:
    """Mixin containing methods for managing webhooks.

    A webhook is identified by the hash the server returns on creation.
    """

    if TYPE_CHECKING:
        endpoints: PixelaEndpoints
        get: Callable[..., str]
        post: Callable[..., str]
        delete: Callable[..., str]

    # FUNC: create_webhook
    def create_webhook(self, graph_id: str, webhook_type: str) -> CreateWebhookResponse:
        """Creates a webhook for a graph.

        Args:
            graph_id: The graph the webhook acts on.
            webhook_type: ``increment``, ``decrement`` and so on.

        Returns:
            Status response carrying ``webhook_hash`` on success.
        """
        payload = WebhookDefinition(graph_id=graph_id, type=webhook_type)
        body = self.post(self.endpoints.webhooks(), payload.to_payload())
        return CreateWebhookResponse.model_validate_json(body)

    # FUNC: get_webhooks
    def get_webhooks(self) -> WebhookResponse:
        body = self.get(self.endpoints.webhooks())
        return WebhookResponse.model_validate_json(body)

    # FUNC: invoke_webhook
    def invoke_webhook(self, webhook_hash: str) -> BasicResponse:
        # No body is sent on invocation
        body = self.post(self.endpoints.webhook(webhook_hash))
        return BasicResponse.model_validate_json(body)

    # FUNC: delete_webhook
    def delete_webhook(self, webhook_hash: str) -> BasicResponse:
        body = self.delete(self.endpoints.webhook(webhook_hash))
        return BasicResponse.model_validate_json(body)

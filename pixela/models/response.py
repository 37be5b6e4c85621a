# pixela/models/response.py

# ─── Model ────────────────────────────────────────────────────────────────────
#            pixe.la Response Shapes
# ──────────────────────────────────────────────────────────────────────────────

# SECTION: MODULE DOCSTRING
"""Pydantic models for the JSON bodies returned by pixe.la.

Every shape accepts the service's status fields (``message``, ``isSuccess``,
``isRejected``) so that an error body decodes into whatever shape the
operation declares. Nothing here raises on ``isSuccess: false`` unless
:meth:`PixelaResponse.raise_for_failure` is called.
"""

# SECTION: IMPORTS
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pixela.api.exception import PixelaAPIError

# SECTION: BASE MODEL


# KLASS: PixelaResponse
class PixelaResponse(BaseModel):
    """Base for all decoded responses."""

    model_config = ConfigDict(
        extra="ignore",  # Ignore fields this client does not model
        populate_by_name=True,
        frozen=True,
    )

    message: str | None = Field(None, description="Server explanation, mainly on failures.")
    is_success: bool | None = Field(None, alias="isSuccess")
    is_rejected: bool | None = Field(None, alias="isRejected", description="Set when the server asks to retry.")

    @property
    def succeeded(self) -> bool:
        """False only when the server explicitly reported ``isSuccess: false``."""
        return self.is_success is not False

    # FUNC: raise_for_failure
    def raise_for_failure(self) -> None:
        """Raise PixelaAPIError if the server reported a failure."""
        if not self.succeeded:
            raise PixelaAPIError(
                self.message or "pixe.la reported a failure",
                is_rejected=self.is_rejected,
                response_data=self.model_dump(by_alias=True, exclude_none=True),
            )


# SECTION: STATUS RESPONSES


# KLASS: BasicResponse
class BasicResponse(PixelaResponse):
    """``{"message": ..., "isSuccess": ...}`` returned by mutating operations."""

    message: str
    is_success: bool = Field(..., alias="isSuccess")


# KLASS: CreateWebhookResponse
class CreateWebhookResponse(BasicResponse):
    """Create-webhook result; carries the server-assigned hash on success."""

    webhook_hash: str | None = Field(None, alias="webhookHash")


# SECTION: PIXEL


# KLASS: PixelResponse
class PixelResponse(PixelaResponse):
    quantity: str | None = None
    optional_data: str | None = Field(None, alias="optionalData")


# SECTION: GRAPHS


# KLASS: GraphsItem
class GraphsItem(BaseModel):
    """One graph definition as listed by the get-graphs endpoint."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    id: str
    name: str
    unit: str
    type: str
    color: str
    timezone: str | None = None
    purge_cache_urls: list[str] = Field(default_factory=list, alias="purgeCacheURLs")
    self_sufficient: str | None = Field(None, alias="selfSufficient")


# KLASS: GraphResponse
class GraphResponse(PixelaResponse):
    graphs: list[GraphsItem] = Field(default_factory=list)


# KLASS: GraphPixelsResponse
class GraphPixelsResponse(PixelaResponse):
    """Dates (yyyyMMdd) that hold a pixel, in server order."""

    pixels: list[str] = Field(default_factory=list)


# SECTION: WEBHOOKS


# KLASS: WebhooksItem
class WebhooksItem(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    webhook_hash: str = Field(..., alias="webhookHash")
    graph_id: str = Field(..., alias="graphID")
    type: str


# KLASS: WebhookResponse
class WebhookResponse(PixelaResponse):
    webhooks: list[WebhooksItem] = Field(default_factory=list)

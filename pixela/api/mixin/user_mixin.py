# pixela/api/mixin/user_mixin.py

# SECTION: MODULE DOCSTRING
"""Mixin class providing pixe.la User related API methods."""

# SECTION: IMPORTS
from __future__ import annotations

from typing import TYPE_CHECKING

from pixela.models.payload import UserCreate, UserUpdate
from pixela.models.response import BasicResponse

# Use TYPE_CHECKING to avoid circular import issues
if TYPE_CHECKING:
    from collections.abc import Callable

    from pixela.api.endpoints import PixelaEndpoints

# SECTION: MIXIN CLASS


# KLASS: UserMixin
class UserMixin:
    """Mixin containing methods for the ``/v1/users`` endpoints."""

    # Assert self is PixelaAPI for type hinting internal methods
    if TYPE_CHECKING:
        username: str
        token: str
        endpoints: PixelaEndpoints
        post: Callable[..., str]
        put: Callable[..., str]
        delete: Callable[..., str]

    # FUNC: create_user
    def create_user(self, agree_terms_of_service: str, not_minor: str) -> BasicResponse:
        """Registers the current username and token with pixe.la.

        Args:
            agree_terms_of_service: ``"yes"`` or ``"no"``.
            not_minor: ``"yes"`` or ``"no"``.

        Returns:
            The service's status response.
        """
        payload = UserCreate(
            token=self.token,
            username=self.username,
            agree_terms_of_service=agree_terms_of_service,
            not_minor=not_minor,
        )
        body = self.post(self.endpoints.users(), payload.to_payload())
        return BasicResponse.model_validate_json(body)

    # FUNC: update_user
    def update_user(self, new_token: str) -> BasicResponse:
        """Changes the user's token on the server.

        The local token is left untouched; call ``set_token`` once the
        update has succeeded.
        """
        payload = UserUpdate(new_token=new_token)
        body = self.put(self.endpoints.user(), payload.to_payload())
        return BasicResponse.model_validate_json(body)

    # FUNC: delete_user
    def delete_user(self) -> BasicResponse:
        body = self.delete(self.endpoints.user())
        return BasicResponse.model_validate_json(body)

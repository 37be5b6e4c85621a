# pixela/api/exception.py

# SECTION: MODULE DOCSTRING
"""Defines the exception raised for failed pixe.la API responses."""

# SECTION: IMPORTS
from typing import Any

# SECTION: EXCEPTION CLASS


# KLASS: PixelaAPIError
class PixelaAPIError(Exception):
    """Raised on request by a response whose ``isSuccess`` flag is false.

    The client itself never raises this; see
    :meth:`pixela.models.response.PixelaResponse.raise_for_failure`.
    """

    # FUNC: __init__
    def __init__(
        self,
        message: str,
        is_rejected: bool | None = None,
        response_data: Any | None = None,
    ):
        """Initialize the API error.

        Args:
            message: The server's explanation.
            is_rejected: The server's ``isRejected`` flag, if present.
            response_data: The decoded response body, if available.
        """
        super().__init__(message)
        self.is_rejected = is_rejected
        self.response_data = response_data

    # FUNC: __str__
    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.is_rejected:
            return f"PixelaAPIError: {base_msg} (rejected, retry the request)"
        return f"PixelaAPIError: {base_msg}"

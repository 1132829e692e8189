"""
Value objects for the routing bounded context.

Entities are immutable dataclasses. They hold no framework state
and are built fresh for every failed request.
"""

import re
from dataclasses import dataclass

ERROR_CODE_PATTERN = re.compile(r"[0-9]{3}-[0-9]{3}")

WRONG_URL_CODE = "400-001"
WRONG_URL_MESSAGE = "wrong url"


@dataclass(frozen=True)
class ErrorBody:
    """Machine-readable error returned to API callers.

    Attributes:
        code: Short error code in ``NNN-NNN`` form.
        message: Human-readable description.
    """

    code: str
    message: str

    def __post_init__(self) -> None:
        if not ERROR_CODE_PATTERN.fullmatch(self.code):
            raise ValueError(f"Error code must look like NNN-NNN, got {self.code!r}")
        if not self.message:
            raise ValueError("Error message must not be empty")

    def to_dict(self) -> dict[str, str]:
        """Return the wire representation, code first."""
        return {"code": self.code, "message": self.message}


def wrong_url() -> ErrorBody:
    """Build the error body for a request that matched no route."""
    return ErrorBody(code=WRONG_URL_CODE, message=WRONG_URL_MESSAGE)

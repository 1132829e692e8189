"""
Data Transfer Objects for the sample application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PostMessageCommand:
    """Input DTO for posting a message.

    Attributes:
        body: Free-form text accepted by the endpoint.
    """

    body: str


@dataclass(frozen=True)
class PostMessageResult:
    """Output DTO returned after a message is accepted."""

    body: str

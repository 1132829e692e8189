"""
Use case: Accept a posted message and echo it back.

Input: PostMessageCommand (body)
Output: PostMessageResult
Side effects: None.
Failure cases: None.
"""

import logging

from app.application.sample.dtos import PostMessageCommand, PostMessageResult

logger = logging.getLogger(__name__)


class PostMessageUseCase:
    """Accepts a validated message from the interface layer."""

    def execute(self, command: PostMessageCommand) -> PostMessageResult:
        """Run the post message use case.

        Args:
            command: The validated message.

        Returns:
            The accepted message.
        """
        logger.info("Accepted message of length=%d", len(command.body))
        return PostMessageResult(body=command.body)

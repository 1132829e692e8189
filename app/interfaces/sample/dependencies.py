"""
Dependency injection for the sample bounded context.

Provides FastAPI dependency functions that build use cases.
Tests replace these through ``app.dependency_overrides``.
"""

from app.application.sample.post_message import PostMessageUseCase


def get_post_message_use_case() -> PostMessageUseCase:
    """Build PostMessageUseCase."""
    return PostMessageUseCase()

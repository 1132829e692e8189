"""
Shared cross-cutting concerns.

Error translation, unmatched-route dispatch, security middleware,
logging and the standalone app builder used by tests.
"""

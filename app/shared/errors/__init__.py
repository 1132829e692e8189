"""
Shared error handling package.

Centralizes error-to-HTTP mapping so that domain errors,
including route misses, are translated in exactly one place.
"""

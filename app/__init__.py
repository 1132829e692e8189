"""
Route Miss API.

Application package root. A small FastAPI service whose requests that
match no route are translated into a fixed JSON error by a single
centralized handler.

Bounded contexts:
    - routing: Route-miss signal and its error body.
    - sample: The ``POST /post`` endpoint.

Layers:
    - domain: Entities, value objects, errors. No framework imports.
    - application: Use cases and DTOs.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, dispatch, security, logging).
"""

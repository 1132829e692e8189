"""
Interfaces layer package.

Contains FastAPI routers and Pydantic request/response schemas.
Routes call use cases and return responses; they never build
error bodies themselves.
"""

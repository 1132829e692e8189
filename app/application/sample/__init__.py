"""
Sample bounded context — application layer.

Holds the use case behind the ``POST /post`` endpoint.
"""

"""
Routing bounded context — domain layer.

Describes what happens when a request reaches the application
but no registered route accepts it:
- The route-miss signal raised by the dispatcher
- The fixed error body returned to the caller
"""

"""
Domain layer package.

Value objects and errors only. No framework imports, no IO.
"""

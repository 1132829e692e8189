"""
Application layer package.

Each use case is a single class with one public method.
"""

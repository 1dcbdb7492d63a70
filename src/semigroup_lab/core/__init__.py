"""
Core value types, error taxonomy, configuration and caching.

This package holds the foundational building blocks that the algorithms
and advanced modules are written against.
"""

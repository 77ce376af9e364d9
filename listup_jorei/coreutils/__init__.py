"""
Core Utilities

Shared helpers used by every layer: environment, logging, errors, HTTP.
"""

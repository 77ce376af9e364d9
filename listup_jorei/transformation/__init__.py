"""
Transformation Layer - Pure, Deterministic Functions

This layer maps raw API documents into the persisted shapes.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""

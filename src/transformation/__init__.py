"""
Transformation Layer - Pure, Deterministic Functions

This layer turns raw API text into the values we care about.
- Pure functions (input → output)
- No I/O operations
- Unit testable
"""

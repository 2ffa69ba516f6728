"""
Extract Layer - Pure I/O to External APIs

This layer handles all external data fetching with no business logic.
- No imports from transform or load layers
- Returns raw response text, untouched
- No retries, no status checks, errors propagate to the caller
"""

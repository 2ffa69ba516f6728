"""
Load Layer - Data Persistence

Optional local copies of a run's output.
- Raw response text (JSON)
- Extracted agencies (Parquet)
- No business logic, just I/O operations
"""

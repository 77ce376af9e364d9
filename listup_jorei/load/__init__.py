"""
Load Layer - Data Persistence

This layer handles all data persistence operations.
- One JSON file per ordinance record
- The index artifact of record summaries
- No business logic, just I/O operations
"""

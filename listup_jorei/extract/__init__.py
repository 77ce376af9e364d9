"""
Extract Layer - Pure I/O to the jorei API

This layer handles all external data fetching with no business logic.
- No imports from transform or load layers
- Builds query URLs and returns validated raw responses
- Surfaces transport and decode failures, never retries
"""

"""
Orchestration Layer - Workflow Coordination

This layer coordinates the crawl.
- Pagination over the search results
- Per-record fetch, normalize, write
- Fixed pause between pages
"""

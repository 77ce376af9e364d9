"""
listup_jorei - Municipal ordinance crawler

Crawls the Doshisha reiki search API and stores every ordinance ("jorei")
as a JSON file, plus an index of summaries.
"""

__version__ = "0.1.0"

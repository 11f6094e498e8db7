"""
Persistence adapters.

Each module implements PersonRepository for one storage backend (memory,
JSON file, SQL). Services depend on the abstract interface only.
"""

"""
Core utilities shared across the Person API.

This package hosts configuration helpers (env vars, paths) and logging setup.
Services and repositories should depend on these primitives instead of
reading os.environ directly.
"""

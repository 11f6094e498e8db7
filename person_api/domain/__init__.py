"""Domain types and validation rules for Person records."""

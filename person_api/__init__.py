"""Validating CRUD service for Person records."""

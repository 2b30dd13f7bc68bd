"""Shared helpers: typed errors, logging and small text utilities."""

"""Shared helpers: configuration loading and logging."""

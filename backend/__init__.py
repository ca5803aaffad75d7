"""
GitHub Browser - relay backend.

Provides a FastAPI backend that forwards read-only queries to the GitHub
REST API for the browser frontend.
"""

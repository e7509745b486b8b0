"""Shared infrastructure: security helpers, pagination and middleware."""

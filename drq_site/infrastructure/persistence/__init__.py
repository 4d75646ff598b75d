"""Persistence: repositories behind the application ports."""

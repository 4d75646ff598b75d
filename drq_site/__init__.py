"""Disaster Recovery Queensland site API."""

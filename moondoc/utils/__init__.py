"""Shared utilities: configuration and the exception hierarchy."""

"""Shared utilities: logging setup, timestamp parsing and image recovery."""

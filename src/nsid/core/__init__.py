"""Core identifier types, configuration and shared helpers."""

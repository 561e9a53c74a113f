"""Implementations behind the pkgrename CLI commands."""

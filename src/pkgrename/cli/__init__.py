"""Command line interface for pkgrename."""

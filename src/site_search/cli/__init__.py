"""Command line interface for Site Search."""

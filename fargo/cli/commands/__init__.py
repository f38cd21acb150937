"""Command implementations for the fargo CLI."""

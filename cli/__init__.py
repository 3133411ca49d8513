"""Command-line interface for splicekit."""

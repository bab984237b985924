"""Command-line interface for levelbridge."""

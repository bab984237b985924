"""Shared constants for levelbridge."""

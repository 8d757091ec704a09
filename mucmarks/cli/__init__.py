"""CLI module for mucmarks."""

"""Utility functions for mucmarks."""

"""Command-line interface for xpkg."""

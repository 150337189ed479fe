"""Command-line interface for dockhand."""

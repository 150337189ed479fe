"""Utilities for dockhand."""

"""Shared helpers used across packages."""

"""Utility packages: logging, filesystem access, external tools."""

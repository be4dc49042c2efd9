"""Core package: name matching, suffix classification and the compare stage."""

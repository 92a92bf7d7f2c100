"""System instruction templates for each operation."""

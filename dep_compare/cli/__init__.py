"""Command line interface for DepCompare."""

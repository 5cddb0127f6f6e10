"""Command-line interface for ibanval."""

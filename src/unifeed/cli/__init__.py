"""Command-line interface for Unifeed."""

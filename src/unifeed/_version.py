"""Version information for Unifeed."""

__version__ = "0.1.0"

"""Single source of truth for the zkcli version string."""

__version__ = "1.0.0"

"""CLI layer — argument parsing, output formatting, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra``, and the top-level config/logging modules, but
no other layer may import from ``cli``.
"""

"""CLI layer — argument parsing, user interaction, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``config`` and ``infra``, but no other layer may import
from ``cli``.
"""

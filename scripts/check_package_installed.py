#!/usr/bin/env python3
"""Exit 0 if the gasoprice package is importable, 1 otherwise."""

import sys

try:
    import gasoprice  # noqa: F401
    sys.exit(0)
except ImportError:
    sys.exit(1)

# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import create, open_project, package, run, validate

__all__ = ["create", "open_project", "package", "run", "validate"]

# SPDX-License-Identifier: MIT
"""Command-line interface for packaging hosted web apps with Cordova."""

__version__ = "0.1.0"

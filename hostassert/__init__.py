# SPDX-License-Identifier: MIT
"""Declarative host assertions: named checks evaluated against the local OS."""

__version__ = "0.1.0"

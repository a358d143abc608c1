# SPDX-License-Identifier: MIT
"""Platform detection."""

from .detection import Platform, detect_platform

__all__ = ["Platform", "detect_platform"]

# SPDX-License-Identifier: MIT
"""Services orchestrating checker construction and evaluation."""

from hostassert.services.run import CheckOutcome, CheckStatus, RunReport, RunService

__all__ = ["CheckOutcome", "CheckStatus", "RunReport", "RunService"]

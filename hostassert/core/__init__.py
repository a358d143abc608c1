# SPDX-License-Identifier: MIT
"""Core types: results, exit codes and check definition loading."""

from .config import CheckDefinition, ConfigError, load_definitions, parse_definitions
from .errors import ErrorCode
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "CheckDefinition",
    "ConfigError",
    "load_definitions",
    "parse_definitions",
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]

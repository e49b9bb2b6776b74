#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Utility exports for EasyRest core.
"""

from .logger import ModernLogger, get_logger
from .exceptions import *  # noqa: F401,F403
from .exceptions import ExceptionFormatter

format_exception_summary = ExceptionFormatter.format_exception_summary

__all__ = [
    "ModernLogger",
    "get_logger",
    "EasyRestError",
    "ContractCompilationError",
    "ArgumentError",
    "OperationCancelledError",
    "ExceptionFormatter",
    "format_exception_summary",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Exception hierarchy for EasyRest.

All framework errors derive from ``EasyRestError`` and carry a human readable
message, optional structured details and an optional underlying cause.
"""

from typing import Any, Dict, Optional


class EasyRestError(Exception):
    """
    Base class for all EasyRest errors.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
        }
        if self.details:
            payload["details"] = dict(self.details)
        if self.cause is not None:
            payload["cause"] = "{0}: {1}".format(
                self.cause.__class__.__name__, self.cause
            )
        return payload

    def __str__(self) -> str:
        return self.message


class ContractCompilationError(EasyRestError):
    """
    Raised when a contract type cannot be turned into an adapter.

    This is a static error: compiling the same contract again reproduces it.
    """

    def __init__(
        self,
        message: str,
        *,
        contract_name: Optional[str] = None,
        method_name: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if contract_name is not None:
            details["contract_name"] = contract_name
        if method_name is not None:
            details["method_name"] = method_name
        super().__init__(message, details=details, cause=cause)
        self.contract_name = contract_name
        self.method_name = method_name


class ArgumentError(EasyRestError, ValueError):
    """
    Raised when a call-time argument is wired incorrectly, e.g. a custom
    serialization strategy with no serializer supplied.
    """

    def __init__(
        self,
        message: str,
        *,
        parameter_name: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if parameter_name is not None:
            details["parameter_name"] = parameter_name
        super().__init__(message, details=details, cause=cause)
        self.parameter_name = parameter_name


class OperationCancelledError(EasyRestError):
    """
    Raised by backends that honour a cancelled ``CancellationToken``.
    """


class ExceptionFormatter:
    """
    Render exceptions for log lines.
    """

    @staticmethod
    def format_exception_summary(exc: BaseException) -> str:
        """
        One-line ``Type: message`` summary, including the cause if present.
        """
        summary = "{0}: {1}".format(exc.__class__.__name__, exc)
        cause = getattr(exc, "cause", None) or exc.__cause__
        if cause is not None and cause is not exc:
            summary += " (caused by {0}: {1})".format(cause.__class__.__name__, cause)
        return summary


__all__ = [
    "EasyRestError",
    "ContractCompilationError",
    "ArgumentError",
    "OperationCancelledError",
    "ExceptionFormatter",
]

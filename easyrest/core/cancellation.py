#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Cancellation handles passed through to request backends.

EasyRest itself never inspects a token; it only forwards it inside the
``RequestInfo`` so that backends can stop work early.
"""

import threading
from typing import Optional

from .utils.exceptions import OperationCancelledError


class CancellationToken:
    """
    Read-only view of a cancellation signal.
    """

    NONE: "CancellationToken"

    __slots__ = ("_event",)

    def __init__(self, event: Optional[threading.Event] = None) -> None:
        self._event = event

    @property
    def can_be_cancelled(self) -> bool:
        return self._event is not None

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event is not None and self._event.is_set()

    def raise_if_cancellation_requested(self) -> None:
        if self.is_cancellation_requested:
            raise OperationCancelledError("The operation was cancelled")

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until cancellation is requested or ``timeout`` elapses.
        """
        if self._event is None:
            return False
        return self._event.wait(timeout)

    def __repr__(self) -> str:
        if self._event is None:
            return "CancellationToken.NONE"
        return "CancellationToken(cancelled={0})".format(self.is_cancellation_requested)


CancellationToken.NONE = CancellationToken()


class CancellationTokenSource:
    """
    Owner side of a cancellation signal.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self.token = CancellationToken(self._event)

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

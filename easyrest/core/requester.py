#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Backend contract that generated adapters dispatch to.

Requesters own the network transport; adapters only build ``RequestInfo``
objects and forward them.
"""

from abc import ABC, abstractmethod
from typing import Any, Type, TypeVar

from .request import RequestInfo

T = TypeVar("T")


class Requester(ABC):
    """
    Execution contract for generated adapters.

    Both entry points return an opaque handle (typically an awaitable) which
    adapters hand back to the caller unchanged.
    """

    @abstractmethod
    def request_void(self, request_info: RequestInfo) -> Any:
        """
        Execute a request whose response body is discarded.
        """

    @abstractmethod
    def request(self, request_info: RequestInfo, result_type: Type[T]) -> Any:
        """
        Execute a request and produce a value of ``result_type``.
        """

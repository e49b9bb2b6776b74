#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Per-call request descriptor.
"""

from typing import Any, Iterable, List, Optional, Tuple

from .cancellation import CancellationToken
from .data.serialization import (
    QueryCollectionParameterInfo,
    QueryParameterInfo,
    QueryValueParameterInfo,
    RequestQueryParamSerializer,
)
from .models import HttpMethod, QuerySerializationMethod


class RequestInfo:
    """
    Everything a backend needs to perform one request.

    A new instance is built for every adapter call and is owned by that call
    only; parameters are appended in method declaration order.
    """

    __slots__ = ("method", "path", "cancellation_token", "query_params")

    def __init__(
        self,
        method: HttpMethod,
        path: str,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        self.method = HttpMethod.from_value(method)
        self.path = path
        self.cancellation_token = (
            cancellation_token if cancellation_token is not None else CancellationToken.NONE
        )
        self.query_params: List[QueryParameterInfo] = []

    def add_parameter(self, parameter: QueryParameterInfo) -> None:
        self.query_params.append(parameter)

    def add_query_parameter(
        self,
        serialization_method: QuerySerializationMethod,
        name: str,
        value: Any,
        format: Optional[str] = None,
    ) -> None:
        self.add_parameter(
            QueryValueParameterInfo(serialization_method, name, value, format)
        )

    def add_query_collection_parameter(
        self,
        serialization_method: QuerySerializationMethod,
        name: str,
        values: Optional[Iterable[Any]],
        format: Optional[str] = None,
    ) -> None:
        self.add_parameter(
            QueryCollectionParameterInfo(serialization_method, name, values, format)
        )

    def query_pairs(
        self, serializer: Optional[RequestQueryParamSerializer] = None
    ) -> List[Tuple[str, str]]:
        """
        Flatten all bound parameters into ordered ``(name, value)`` pairs.
        """
        pairs: List[Tuple[str, str]] = []
        for parameter in self.query_params:
            pairs.extend(parameter.serialize(serializer))
        return pairs

    def __repr__(self) -> str:
        return "RequestInfo(method={0}, path={1!r}, query_params={2!r})".format(
            self.method.value, self.path, self.query_params
        )

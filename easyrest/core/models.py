#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Contract description models for EasyRest.

These are the resolved, immutable form of a contract: one
``ContractDescription`` per contract type, one ``MethodDescription`` per
remote operation and one ``ParameterDescription`` per declared parameter.
The compiler consumes only these structures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple, Union


class HttpMethod(str, Enum):
    """
    HTTP verbs a contract method can be bound to.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    @classmethod
    def from_value(cls, value: Union["HttpMethod", str]) -> "HttpMethod":
        """
        Parse an HTTP method from enum/string.
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().upper())


class QuerySerializationMethod(str, Enum):
    """
    How a query parameter value is turned into strings.
    """

    TO_STRING = "to_string"
    SERIALIZED = "serialized"


class ParameterRole(str, Enum):
    """
    Binding role of a contract method parameter.
    """

    QUERY = "query"
    CANCELLATION = "cancellation"
    IGNORED = "ignored"


class ResultShape(str, Enum):
    """
    Declared result of a contract method.
    """

    VOID = "void"
    VALUE = "value"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class RequestDefinition:
    """
    Verb and path template attached to a contract method.
    """

    method: HttpMethod
    path: str


@dataclass(frozen=True)
class ParameterDescription:
    """
    Binding metadata for one parameter of a contract method.

    ``index`` is the position in the method signature excluding ``self``.
    ``query_name``, ``format`` and ``serialization_method`` only matter for
    the query role.
    """

    index: int
    name: str
    role: ParameterRole
    annotation: Any = None
    query_name: Optional[str] = None
    format: Optional[str] = None
    serialization_method: QuerySerializationMethod = QuerySerializationMethod.TO_STRING
    is_collection: bool = False


@dataclass(frozen=True)
class MethodDescription:
    """
    One remote operation of a contract.
    """

    name: str
    function: Any
    request: Optional[RequestDefinition]
    parameters: Tuple[ParameterDescription, ...] = ()
    result_shape: ResultShape = ResultShape.UNSUPPORTED
    result_type: Any = None
    declared_result: Any = None


@dataclass(frozen=True)
class ContractDescription:
    """
    All remote operations of one contract type, in declaration order.
    """

    contract_type: type
    methods: Tuple[MethodDescription, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return "{0}.{1}".format(
            self.contract_type.__module__, self.contract_type.__qualname__
        )

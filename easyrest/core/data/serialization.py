#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Query parameter serialization for EasyRest.

Each bound query argument becomes a ``QueryParameterInfo`` that can turn
itself into zero or more ``(name, value)`` string pairs, either through the
default stringification rule or through a caller-supplied
``RequestQueryParamSerializer``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    runtime_checkable,
)

from ..models import QuerySerializationMethod
from ..utils.exceptions import ArgumentError

T = TypeVar("T")

QueryPair = Tuple[str, str]


@dataclass(frozen=True)
class RequestQueryParamSerializerInfo:
    """
    Context handed to a custom serializer alongside the raw value.
    """

    format: Optional[str] = None


@runtime_checkable
class RequestQueryParamSerializer(Protocol):
    """Protocol for custom query parameter serializers"""

    def serialize_query_param(
        self, name: str, value: Any, info: RequestQueryParamSerializerInfo
    ) -> Iterable[QueryPair]:
        """Serialize a single value into name/value pairs"""
        ...

    def serialize_query_collection_param(
        self, name: str, values: Optional[Iterable[Any]], info: RequestQueryParamSerializerInfo
    ) -> Iterable[QueryPair]:
        """Serialize a collection of values into name/value pairs"""
        ...


def _is_format_aware(value: Any) -> bool:
    # Strings define __format__ but reject most format specs; treat them as plain text.
    if isinstance(value, (str, bytes, bytearray)):
        return False
    # Plain enums format through str and reject hints such as "G".
    if isinstance(value, Enum) and type(value)._member_type_ is object:
        return False
    return type(value).__format__ is not object.__format__


def format_query_value(value: Any, format_spec: Optional[str] = None) -> str:
    """
    Stringify one non-null value.

    Values whose type implements ``__format__`` are rendered with the format
    hint; everything else falls back to ``str()``.
    """
    if _is_format_aware(value):
        return format(value, format_spec or "")
    return str(value)


class QueryParameterInfo(ABC):
    """
    Information about one bound query parameter.

    The serialization method is fixed at construction.
    """

    __slots__ = ("_serialization_method", "name", "format")

    def __init__(
        self,
        serialization_method: QuerySerializationMethod,
        name: str,
        format: Optional[str] = None,
    ) -> None:
        self._serialization_method = QuerySerializationMethod(serialization_method)
        self.name = name
        self.format = format

    @property
    def serialization_method(self) -> QuerySerializationMethod:
        return self._serialization_method

    @property
    def serializer_info(self) -> RequestQueryParamSerializerInfo:
        return RequestQueryParamSerializerInfo(format=self.format)

    @abstractmethod
    def serialize_value(
        self, serializer: Optional[RequestQueryParamSerializer]
    ) -> Iterable[QueryPair]:
        """
        Serialize the raw value using the given custom serializer.
        """

    @abstractmethod
    def serialize_to_string(self) -> Iterable[QueryPair]:
        """
        Serialize the value using the default stringification rule.
        """

    def serialize(
        self, serializer: Optional[RequestQueryParamSerializer] = None
    ) -> List[QueryPair]:
        """
        Serialize using whichever strategy this parameter was bound with.
        """
        if self._serialization_method is QuerySerializationMethod.SERIALIZED:
            return list(self.serialize_value(serializer))
        return list(self.serialize_to_string())

    def _require_serializer(
        self, serializer: Optional[RequestQueryParamSerializer]
    ) -> RequestQueryParamSerializer:
        if serializer is None:
            raise ArgumentError(
                "A serializer is required to serialize query parameter '{0}'".format(
                    self.name
                ),
                parameter_name=self.name,
            )
        return serializer


class QueryValueParameterInfo(QueryParameterInfo, Generic[T]):
    """
    Query parameter holding a single value.
    """

    __slots__ = ("value",)

    def __init__(
        self,
        serialization_method: QuerySerializationMethod,
        name: str,
        value: Optional[T],
        format: Optional[str] = None,
    ) -> None:
        super().__init__(serialization_method, name, format)
        self.value = value

    def serialize_value(
        self, serializer: Optional[RequestQueryParamSerializer]
    ) -> Iterable[QueryPair]:
        serializer = self._require_serializer(serializer)
        return serializer.serialize_query_param(self.name, self.value, self.serializer_info)

    def serialize_to_string(self) -> Iterable[QueryPair]:
        if self.value is None:
            return ()
        return ((self.name, format_query_value(self.value, self.format)),)

    def __repr__(self) -> str:
        return "QueryValueParameterInfo(name={0!r}, value={1!r}, format={2!r}, method={3})".format(
            self.name, self.value, self.format, self._serialization_method.value
        )


class QueryCollectionParameterInfo(QueryParameterInfo, Generic[T]):
    """
    Query parameter holding a sequence of values, emitted as repeated keys.
    """

    __slots__ = ("values",)

    def __init__(
        self,
        serialization_method: QuerySerializationMethod,
        name: str,
        values: Optional[Iterable[Optional[T]]],
        format: Optional[str] = None,
    ) -> None:
        super().__init__(serialization_method, name, format)
        self.values = values

    def serialize_value(
        self, serializer: Optional[RequestQueryParamSerializer]
    ) -> Iterable[QueryPair]:
        serializer = self._require_serializer(serializer)
        return serializer.serialize_query_collection_param(
            self.name, self.values, self.serializer_info
        )

    def serialize_to_string(self) -> Iterator[QueryPair]:
        if self.values is None:
            return
        for value in self.values:
            if value is None:
                continue
            yield self.name, format_query_value(value, self.format)

    def __repr__(self) -> str:
        return "QueryCollectionParameterInfo(name={0!r}, values={1!r}, format={2!r}, method={3})".format(
            self.name, self.values, self.format, self._serialization_method.value
        )

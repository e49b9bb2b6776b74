#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Declaration helpers for EasyRest contracts.

A contract is an ordinary class whose public methods carry a verb decorator;
parameters opt into query binding with ``typing.Annotated``::

    class WidgetApi(ABC):
        @get("/widgets")
        async def find(
            self,
            id: Annotated[int, Query("id")],
            token: CancellationToken = CancellationToken.NONE,
        ) -> Widget:
            ...
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar, Union

from .core.models import HttpMethod, QuerySerializationMethod, RequestDefinition

F = TypeVar("F", bound=Callable[..., Any])

REQUEST_DEFINITION_ATTR = "__easyrest_request__"


@dataclass(frozen=True)
class Query:
    """
    Marks a parameter as a query parameter.

    ``name`` defaults to the Python parameter name. ``format`` is passed to
    the value's ``__format__`` (default strategy) or to the custom serializer.
    """

    name: Optional[str] = None
    format: Optional[str] = None
    serialization: QuerySerializationMethod = QuerySerializationMethod.TO_STRING


def request(method: Union[HttpMethod, str], path: str = "") -> Callable[[F], F]:
    """
    Bind a contract method to an HTTP verb and path template.
    """
    definition = RequestDefinition(method=HttpMethod.from_value(method), path=path)

    def decorator(func: F) -> F:
        setattr(func, REQUEST_DEFINITION_ATTR, definition)
        return func

    return decorator


def _verb(method: HttpMethod) -> Callable[[str], Callable[[F], F]]:
    def factory(path: str = "") -> Callable[[F], F]:
        return request(method, path)

    factory.__name__ = method.value.lower()
    factory.__doc__ = "Bind a contract method to ``{0} path``.".format(method.value)
    return factory


get = _verb(HttpMethod.GET)
post = _verb(HttpMethod.POST)
put = _verb(HttpMethod.PUT)
delete = _verb(HttpMethod.DELETE)
head = _verb(HttpMethod.HEAD)
options = _verb(HttpMethod.OPTIONS)
trace = _verb(HttpMethod.TRACE)
patch = _verb(HttpMethod.PATCH)


def get_request_definition(func: Any) -> Optional[RequestDefinition]:
    """
    Return the verb/path attached to ``func``, if any.
    """
    target = getattr(func, "__func__", func)
    definition = getattr(target, REQUEST_DEFINITION_ATTR, None)
    if isinstance(definition, RequestDefinition):
        return definition
    return None


__all__ = [
    "Query",
    "request",
    "get",
    "post",
    "put",
    "delete",
    "head",
    "options",
    "trace",
    "patch",
    "get_request_definition",
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Build ``ContractDescription`` objects from decorated contract classes.

The reader only records what is declared. Validation (missing verbs,
duplicate cancellation tokens, unsupported result shapes) belongs to the
compiler.
"""

import collections.abc
import inspect
import types
import typing
from typing import Any, Dict, List, Optional, Tuple

from ..decorators import Query, get_request_definition
from .cancellation import CancellationToken
from .models import (
    ContractDescription,
    MethodDescription,
    ParameterDescription,
    ParameterRole,
    ResultShape,
)
from .utils.exceptions import ContractCompilationError

_NONE_TYPE = type(None)
_AWAITABLE_ORIGINS = (collections.abc.Awaitable, collections.abc.Coroutine)
_SCALAR_ITERABLES = (str, bytes, bytearray, collections.abc.Mapping)
_UNION_TYPES: Tuple[Any, ...] = (typing.Union,)
if hasattr(types, "UnionType"):
    _UNION_TYPES = _UNION_TYPES + (types.UnionType,)


def _split_annotated(hint: Any) -> Tuple[Any, Tuple[Any, ...]]:
    if typing.get_origin(hint) is typing.Annotated:
        args = typing.get_args(hint)
        return args[0], tuple(args[1:])
    return hint, ()


def _strip_optional(hint: Any) -> Any:
    if typing.get_origin(hint) in _UNION_TYPES:
        members = [arg for arg in typing.get_args(hint) if arg is not _NONE_TYPE]
        if len(members) == 1:
            return members[0]
    return hint


def _is_cancellation_token(hint: Any) -> bool:
    base, _ = _split_annotated(hint)
    base = _strip_optional(base)
    return inspect.isclass(base) and issubclass(base, CancellationToken)


def _is_collection(hint: Any) -> bool:
    base = _strip_optional(hint)
    origin = typing.get_origin(base) or base
    if not inspect.isclass(origin):
        return False
    return issubclass(origin, collections.abc.Iterable) and not issubclass(
        origin, _SCALAR_ITERABLES
    )


def _find_query_marker(metadata: Tuple[Any, ...]) -> Optional[Query]:
    for item in metadata:
        if isinstance(item, Query):
            return item
        if item is Query:
            return Query()
    return None


def _iter_contract_functions(contract_type: type) -> List[Tuple[str, Any]]:
    functions: Dict[str, Any] = {}
    for klass in reversed(contract_type.__mro__):
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name.startswith("_") or not inspect.isfunction(attr):
                continue
            functions[name] = attr
    return list(functions.items())


def _resolve_hints(contract_type: type, func: Any) -> Dict[str, Any]:
    try:
        return typing.get_type_hints(func, include_extras=True)
    except (NameError, TypeError, AttributeError) as exc:
        raise ContractCompilationError(
            "Unable to resolve type hints for method {0}: {1}".format(func.__name__, exc),
            contract_name=contract_type.__qualname__,
            method_name=func.__name__,
            cause=exc,
        ) from exc


def _describe_parameters(
    signature: inspect.Signature, hints: Dict[str, Any]
) -> Tuple[ParameterDescription, ...]:
    descriptions: List[ParameterDescription] = []
    # Skip ``self``.
    for index, parameter in enumerate(list(signature.parameters.values())[1:]):
        annotation = hints.get(parameter.name)
        if annotation is None and parameter.annotation is not inspect.Parameter.empty:
            annotation = parameter.annotation

        if parameter.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            role = ParameterRole.IGNORED
        elif annotation is not None and _is_cancellation_token(annotation):
            role = ParameterRole.CANCELLATION
        else:
            base, metadata = _split_annotated(annotation)
            if not metadata:
                # ``x: Annotated[T, Query()] = None`` may come back wrapped in Optional.
                base, metadata = _split_annotated(_strip_optional(annotation))
            marker = _find_query_marker(metadata)
            if marker is not None:
                descriptions.append(
                    ParameterDescription(
                        index=index,
                        name=parameter.name,
                        role=ParameterRole.QUERY,
                        annotation=annotation,
                        query_name=marker.name or parameter.name,
                        format=marker.format,
                        serialization_method=marker.serialization,
                        is_collection=_is_collection(base),
                    )
                )
                continue
            role = ParameterRole.IGNORED

        descriptions.append(
            ParameterDescription(
                index=index,
                name=parameter.name,
                role=role,
                annotation=annotation,
            )
        )
    return tuple(descriptions)


def _describe_result(func: Any, hints: Dict[str, Any]) -> Tuple[ResultShape, Any, Any]:
    if "return" not in hints:
        return ResultShape.UNSUPPORTED, None, None

    declared, _ = _split_annotated(hints["return"])
    if inspect.isasyncgenfunction(func) or inspect.isgeneratorfunction(func):
        return ResultShape.UNSUPPORTED, None, declared

    if inspect.iscoroutinefunction(func):
        result_type = declared
    elif typing.get_origin(declared) in _AWAITABLE_ORIGINS:
        args = typing.get_args(declared)
        result_type = args[-1] if args else typing.Any
    else:
        return ResultShape.UNSUPPORTED, None, declared

    if result_type is None or result_type is _NONE_TYPE:
        return ResultShape.VOID, None, declared
    return ResultShape.VALUE, result_type, declared


def describe_method(contract_type: type, name: str, func: Any) -> MethodDescription:
    """
    Describe one contract method.
    """
    hints = _resolve_hints(contract_type, func)
    signature = inspect.signature(func)
    shape, result_type, declared = _describe_result(func, hints)
    return MethodDescription(
        name=name,
        function=func,
        request=get_request_definition(func),
        parameters=_describe_parameters(signature, hints),
        result_shape=shape,
        result_type=result_type,
        declared_result=declared,
    )


def describe_contract(contract_type: type) -> ContractDescription:
    """
    Describe every public method of ``contract_type`` in declaration order.
    """
    if not inspect.isclass(contract_type):
        raise ContractCompilationError(
            "Contract must be a class, got {0!r}".format(contract_type),
            contract_name=repr(contract_type),
        )

    methods = tuple(
        describe_method(contract_type, name, func)
        for name, func in _iter_contract_functions(contract_type)
    )
    return ContractDescription(contract_type=contract_type, methods=methods)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
EasyRest public API with lazy imports.

Contracts are declared as plain classes decorated with HTTP verbs; an
``ImplementationBuilder`` compiles each contract once into an adapter factory
that dispatches calls to a pluggable ``Requester`` backend.
"""

from importlib import import_module
from typing import Any, Dict, Tuple

from ._version import __version__

_EXPORT_MAP: Dict[str, Tuple[str, str]] = {
    "get": ("easyrest.decorators", "get"),
    "post": ("easyrest.decorators", "post"),
    "put": ("easyrest.decorators", "put"),
    "delete": ("easyrest.decorators", "delete"),
    "head": ("easyrest.decorators", "head"),
    "options": ("easyrest.decorators", "options"),
    "trace": ("easyrest.decorators", "trace"),
    "patch": ("easyrest.decorators", "patch"),
    "request": ("easyrest.decorators", "request"),
    "Query": ("easyrest.decorators", "Query"),
    "HttpMethod": ("easyrest.core.models", "HttpMethod"),
    "QuerySerializationMethod": ("easyrest.core.models", "QuerySerializationMethod"),
    "CancellationToken": ("easyrest.core.cancellation", "CancellationToken"),
    "CancellationTokenSource": ("easyrest.core.cancellation", "CancellationTokenSource"),
    "RequestInfo": ("easyrest.core.request", "RequestInfo"),
    "Requester": ("easyrest.core.requester", "Requester"),
    "RequestQueryParamSerializer": (
        "easyrest.core.data.serialization",
        "RequestQueryParamSerializer",
    ),
    "RequestQueryParamSerializerInfo": (
        "easyrest.core.data.serialization",
        "RequestQueryParamSerializerInfo",
    ),
    "ImplementationBuilder": ("easyrest.core.builder", "ImplementationBuilder"),
    "get_default_builder": ("easyrest.core.builder", "get_default_builder"),
    "create_implementation": ("easyrest.core.builder", "create_implementation"),
    "ContractCompilationError": (
        "easyrest.core.utils.exceptions",
        "ContractCompilationError",
    ),
    "ArgumentError": ("easyrest.core.utils.exceptions", "ArgumentError"),
}

__all__ = ["__version__", *sorted(_EXPORT_MAP.keys())]


def __getattr__(name: str) -> Any:
    """
    Resolve public API symbols lazily.
    """
    if name not in _EXPORT_MAP:
        raise AttributeError("module 'easyrest' has no attribute '{0}'".format(name))

    module_name, attr_name = _EXPORT_MAP[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


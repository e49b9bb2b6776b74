#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
EasyRest core module exports (lazy-loaded).
"""

from importlib import import_module
from typing import Any, Dict, Tuple

_EXPORT_MAP: Dict[str, Tuple[str, str]] = {
    "EasyRestConfig": ("easyrest.core.config", "EasyRestConfig"),
    "get_config": ("easyrest.core.config", "get_config"),
    "set_config": ("easyrest.core.config", "set_config"),
    "create_config": ("easyrest.core.config", "create_config"),
    "CancellationToken": ("easyrest.core.cancellation", "CancellationToken"),
    "CancellationTokenSource": ("easyrest.core.cancellation", "CancellationTokenSource"),
    "RequestInfo": ("easyrest.core.request", "RequestInfo"),
    "Requester": ("easyrest.core.requester", "Requester"),
    "describe_contract": ("easyrest.core.reader", "describe_contract"),
    "ContractCompiler": ("easyrest.core.compiler", "ContractCompiler"),
    "AdapterFactory": ("easyrest.core.compiler", "AdapterFactory"),
    "ImplementationCache": ("easyrest.core.cache", "ImplementationCache"),
    "ImplementationBuilder": ("easyrest.core.builder", "ImplementationBuilder"),
    "get_default_builder": ("easyrest.core.builder", "get_default_builder"),
    "set_default_builder": ("easyrest.core.builder", "set_default_builder"),
}

__all__ = sorted(_EXPORT_MAP.keys())


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MAP:
        raise AttributeError("module 'easyrest.core' has no attribute '{0}'".format(name))

    module_name, attr_name = _EXPORT_MAP[name]
    module = import_module(module_name)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value

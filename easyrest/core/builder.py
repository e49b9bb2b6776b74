#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Entry point for turning contracts into adapters.
"""

import threading
from typing import Any, Optional, Type, TypeVar

from .cache import ImplementationCache
from .compiler import AdapterFactory, ContractCompiler
from .config import EasyRestConfig, get_config
from .requester import Requester

T = TypeVar("T")


class ImplementationBuilder:
    """
    Compile-once, create-many facade over ``ContractCompiler`` and
    ``ImplementationCache``.

    Tests construct their own builder to get an isolated cache; application
    code usually goes through ``get_default_builder()``.
    """

    def __init__(
        self,
        cache: Optional[ImplementationCache] = None,
        compiler: Optional[ContractCompiler] = None,
        config: Optional[EasyRestConfig] = None,
    ) -> None:
        self.config = config or get_config()
        self.cache = cache or ImplementationCache(log_level=self.config.log_level)
        self.compiler = compiler or ContractCompiler(self.config)

    def get_factory(self, contract_type: type) -> AdapterFactory:
        return self.cache.get_or_create(contract_type, self.compiler.compile)

    def create_implementation(self, contract_type: Type[T], requester: Requester) -> T:
        """
        Build a new adapter for ``contract_type`` backed by ``requester``.
        """
        factory = self.get_factory(contract_type)
        return factory(requester)

    def validate(self, contract_type: type) -> None:
        """
        Compile ``contract_type`` now so configuration errors surface at
        startup instead of on first call.
        """
        self.get_factory(contract_type)


_default_builder_lock = threading.Lock()
_default_builder: Optional[ImplementationBuilder] = None


def get_default_builder() -> ImplementationBuilder:
    """
    Return the process-wide builder, creating it on first use.
    """
    global _default_builder
    if _default_builder is None:
        with _default_builder_lock:
            if _default_builder is None:
                _default_builder = ImplementationBuilder()
    return _default_builder


def set_default_builder(builder: Optional[ImplementationBuilder]) -> None:
    """
    Replace the process-wide builder. ``None`` resets it.
    """
    global _default_builder
    with _default_builder_lock:
        _default_builder = builder


def create_implementation(contract_type: Type[T], requester: Any) -> T:
    return get_default_builder().create_implementation(contract_type, requester)

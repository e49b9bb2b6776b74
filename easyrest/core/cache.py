#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Insert-only cache of compiled adapter factories.
"""

import threading
from typing import Callable, Dict, Optional

from .compiler import AdapterFactory
from .utils.logger import ModernLogger


class ImplementationCache(ModernLogger):
    """
    Maps contract type to its compiled ``AdapterFactory``.

    Lookups of already compiled contracts take no lock. First use of a
    contract serializes on a lock owned by that contract only, so unrelated
    contracts compile in parallel. Entries are never evicted or replaced,
    and a failed compilation leaves no entry behind.
    """

    def __init__(self, log_level: Optional[str] = None) -> None:
        super().__init__(name="ImplementationCache", level=log_level)
        self._factories: Dict[type, AdapterFactory] = {}
        self._key_locks: Dict[type, threading.Lock] = {}
        self._key_locks_guard = threading.Lock()

    def _lock_for(self, contract_type: type) -> threading.Lock:
        with self._key_locks_guard:
            lock = self._key_locks.get(contract_type)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[contract_type] = lock
            return lock

    def get(self, contract_type: type) -> Optional[AdapterFactory]:
        return self._factories.get(contract_type)

    def get_or_create(
        self,
        contract_type: type,
        create: Callable[[type], AdapterFactory],
    ) -> AdapterFactory:
        """
        Return the cached factory for ``contract_type``, compiling it with
        ``create`` on first use.
        """
        factory = self._factories.get(contract_type)
        if factory is not None:
            self.debug("Cache hit for %s", contract_type.__qualname__)
            return factory

        with self._lock_for(contract_type):
            factory = self._factories.get(contract_type)
            if factory is not None:
                return factory
            factory = create(contract_type)
            self._factories.setdefault(contract_type, factory)
            return self._factories[contract_type]

    def __contains__(self, contract_type: object) -> bool:
        return contract_type in self._factories

    def __len__(self) -> int:
        return len(self._factories)

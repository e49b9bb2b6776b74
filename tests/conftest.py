#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Shared fixtures for the EasyRest suite.
"""

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from easyrest.core.builder import ImplementationBuilder  # noqa: E402
from easyrest.core.config import EasyRestConfig  # noqa: E402


class _CapturingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def builder():
    """Builder with its own cache, isolated from the environment config."""
    return ImplementationBuilder(config=EasyRestConfig())


@pytest.fixture
def root_records():
    """Records reaching the root logger; easyrest logger levels are restored after."""
    root = logging.getLogger()
    handler = _CapturingHandler()
    previous_root_level = root.level
    easyrest_loggers = {
        name: logger.level
        for name, logger in logging.Logger.manager.loggerDict.items()
        if isinstance(logger, logging.Logger)
        and (name == "easyrest" or name.startswith("easyrest."))
    }
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    try:
        yield handler.records
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_root_level)
        for name, logger in list(logging.Logger.manager.loggerDict.items()):
            if not isinstance(logger, logging.Logger):
                continue
            if name in easyrest_loggers:
                logger.setLevel(easyrest_loggers[name])
            elif name == "easyrest" or name.startswith("easyrest."):
                logger.setLevel(logging.NOTSET)

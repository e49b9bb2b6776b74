#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Runtime configuration for EasyRest.

Values come from keyword overrides first, then ``EASYREST_*`` environment
variables, then the dataclass defaults.
"""

import os
import threading
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError("{0} must be a boolean flag, got {1!r}".format(name, raw))


@dataclass(frozen=True)
class EasyRestConfig:
    """
    Settings shared by the compiler, cache and builder.
    """

    # None inherits the level configured by the host application.
    log_level: Optional[str] = None
    # Reject parameters that carry no recognized binding instead of ignoring them.
    strict_parameter_roles: bool = False
    generated_type_prefix: str = "EasyRest"

    def validate(self) -> None:
        if not self.generated_type_prefix or not self.generated_type_prefix.isidentifier():
            raise ValueError("generated_type_prefix must be a valid identifier")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EasyRestConfig":
        env = os.environ if environ is None else environ
        values: dict = {}

        log_level = env.get("EASYREST_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.strip().upper()

        strict = env.get("EASYREST_STRICT_PARAMETER_ROLES")
        if strict is not None:
            values["strict_parameter_roles"] = _parse_bool(
                "EASYREST_STRICT_PARAMETER_ROLES", strict
            )

        prefix = env.get("EASYREST_GENERATED_TYPE_PREFIX")
        if prefix:
            values["generated_type_prefix"] = prefix.strip()

        config = cls(**values)
        config.validate()
        return config


_config_lock = threading.Lock()
_global_config: Optional[EasyRestConfig] = None


def get_config() -> EasyRestConfig:
    """
    Return the process-wide configuration, loading it from the environment
    on first use.
    """
    global _global_config
    if _global_config is None:
        with _config_lock:
            if _global_config is None:
                _global_config = EasyRestConfig.from_env()
    return _global_config


def set_config(config: Optional[EasyRestConfig]) -> None:
    """
    Replace the process-wide configuration. ``None`` resets to environment.
    """
    global _global_config
    with _config_lock:
        _global_config = config


def create_config(**overrides: Any) -> EasyRestConfig:
    """
    Build a configuration from the environment with explicit overrides.
    """
    config = replace(EasyRestConfig.from_env(), **overrides)
    config.validate()
    return config

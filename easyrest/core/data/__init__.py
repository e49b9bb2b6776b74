#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Request parameter serialization model.
"""

from .serialization import (
    QueryCollectionParameterInfo,
    QueryParameterInfo,
    QueryValueParameterInfo,
    RequestQueryParamSerializer,
    RequestQueryParamSerializerInfo,
    format_query_value,
)

__all__ = [
    "QueryParameterInfo",
    "QueryValueParameterInfo",
    "QueryCollectionParameterInfo",
    "RequestQueryParamSerializer",
    "RequestQueryParamSerializerInfo",
    "format_query_value",
]

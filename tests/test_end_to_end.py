#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
End-to-end adapter tests against an async in-memory backend.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Annotated, Any, Dict, List, Optional

import pytest

from easyrest import create_implementation
from easyrest.core.cancellation import CancellationToken, CancellationTokenSource
from easyrest.core.models import HttpMethod, QuerySerializationMethod
from easyrest.core.requester import Requester
from easyrest.core.utils.exceptions import OperationCancelledError
from easyrest.decorators import Query
from easyrest.decorators import get as http_get
from easyrest.decorators import post as http_post


@dataclass
class Widget:
    id: int


class WidgetApi(ABC):
    @http_get("/widgets")
    @abstractmethod
    async def get(self, id: Annotated[int, Query("id")]) -> Widget:
        ...

    @http_get("/widgets/search")
    @abstractmethod
    async def search(
        self,
        filters: Annotated[
            Dict[str, Any], Query("f", serialization=QuerySerializationMethod.SERIALIZED)
        ],
        tags: Annotated[Optional[List[str]], Query("tag")] = None,
        token: CancellationToken = CancellationToken.NONE,
    ) -> List[Widget]:
        ...

    @http_post("/widgets/reindex")
    @abstractmethod
    async def reindex(self, token: CancellationToken) -> None:
        ...


class DottedSerializer:
    def serialize_query_param(self, name, value, info):
        return [("{0}.{1}".format(name, key), str(item)) for key, item in sorted(value.items())]

    def serialize_query_collection_param(self, name, values, info):
        return [(name, ",".join(str(value) for value in values))]


class InMemoryRequester(Requester):
    def __init__(self, serializer=None):
        self.serializer = serializer
        self.requests = []

    async def request_void(self, request_info):
        request_info.cancellation_token.raise_if_cancellation_requested()
        self.requests.append((request_info, None))

    async def request(self, request_info, result_type):
        request_info.cancellation_token.raise_if_cancellation_requested()
        pairs = request_info.query_pairs(self.serializer)
        self.requests.append((request_info, result_type))
        if result_type is Widget:
            return Widget(id=int(dict(pairs)["id"]))
        return [Widget(id=len(pairs))]


def test_get_widget_builds_expected_request(builder):
    requester = InMemoryRequester()
    adapter = builder.create_implementation(WidgetApi, requester)

    widget = asyncio.run(adapter.get(42))

    request_info, result_type = requester.requests[0]
    assert widget == Widget(id=42)
    assert result_type is Widget
    assert request_info.method is HttpMethod.GET
    assert request_info.path == "/widgets"
    assert request_info.query_pairs() == [("id", "42")]


def test_search_mixes_custom_and_default_strategies(builder):
    requester = InMemoryRequester(serializer=DottedSerializer())
    adapter = builder.create_implementation(WidgetApi, requester)

    result = asyncio.run(adapter.search({"size": "L", "color": "red"}, tags=["a", None, "b"]))

    request_info, result_type = requester.requests[0]
    assert result_type == List[Widget]
    assert request_info.query_pairs(DottedSerializer()) == [
        ("f.color", "red"),
        ("f.size", "L"),
        ("tag", "a"),
        ("tag", "b"),
    ]
    assert result == [Widget(id=4)]


def test_cancellation_is_honoured_by_backend_only(builder):
    requester = InMemoryRequester()
    adapter = builder.create_implementation(WidgetApi, requester)
    source = CancellationTokenSource()
    source.cancel()

    with pytest.raises(OperationCancelledError):
        asyncio.run(adapter.reindex(source.token))

    assert requester.requests == []


def test_void_call_completes_with_none(builder):
    requester = InMemoryRequester()
    adapter = builder.create_implementation(WidgetApi, requester)

    assert asyncio.run(adapter.reindex(CancellationToken.NONE)) is None
    assert requester.requests[0][0].path == "/widgets/reindex"


def test_module_level_create_implementation_uses_default_builder():
    requester = InMemoryRequester()

    adapter = create_implementation(WidgetApi, requester)

    assert isinstance(adapter, WidgetApi)
    assert asyncio.run(adapter.get(7)) == Widget(id=7)

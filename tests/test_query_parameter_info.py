#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Tests for the query parameter serialization model.
"""

from datetime import date
from decimal import Decimal
from enum import Enum, IntEnum

import pytest

from easyrest.core.data.serialization import (
    QueryCollectionParameterInfo,
    QueryValueParameterInfo,
    RequestQueryParamSerializer,
    RequestQueryParamSerializerInfo,
    format_query_value,
)
from easyrest.core.models import QuerySerializationMethod
from easyrest.core.utils.exceptions import ArgumentError

TO_STRING = QuerySerializationMethod.TO_STRING
SERIALIZED = QuerySerializationMethod.SERIALIZED


class Temperature:
    def __init__(self, celsius):
        self.celsius = celsius

    def __format__(self, format_spec):
        if format_spec == "F":
            return "{0:.1f}F".format(self.celsius * 9 / 5 + 32)
        return "{0}C".format(self.celsius)

    def __str__(self):
        return "temperature"


class Color(Enum):
    RED = "red"


class Priority(IntEnum):
    HIGH = 3


class Plain:
    def __str__(self):
        return "plain-value"


class RecordingSerializer:
    def __init__(self, pairs=None):
        self.calls = []
        self.pairs = pairs

    def serialize_query_param(self, name, value, info):
        self.calls.append(("single", name, value, info))
        if self.pairs is not None:
            return self.pairs
        return [(name.upper(), "<{0}>".format(value))]

    def serialize_query_collection_param(self, name, values, info):
        self.calls.append(("many", name, values, info))
        if self.pairs is not None:
            return self.pairs
        return [(name, ",".join(str(v) for v in values))]


def test_absent_scalar_yields_no_pairs():
    info = QueryValueParameterInfo(TO_STRING, "x", None, "F")

    assert info.serialize() == []


def test_absent_collection_yields_no_pairs():
    info = QueryCollectionParameterInfo(TO_STRING, "x", None)

    assert info.serialize() == []
    assert list(info.serialize_to_string()) == []


def test_empty_collection_yields_no_pairs():
    info = QueryCollectionParameterInfo(TO_STRING, "x", [])

    assert info.serialize() == []


def test_collection_skips_none_and_keeps_order():
    info = QueryCollectionParameterInfo(TO_STRING, "x", ["a", None, "b"])

    assert info.serialize() == [("x", "a"), ("x", "b")]


def test_collection_serialization_is_restartable():
    info = QueryCollectionParameterInfo(TO_STRING, "x", [3, None, 1])

    first = list(info.serialize_to_string())
    second = list(info.serialize_to_string())

    assert first == second == [("x", "3"), ("x", "1")]


def test_format_aware_value_uses_format_hint():
    info = QueryValueParameterInfo(TO_STRING, "x", Temperature(100), "F")

    assert info.serialize() == [("x", "212.0F")]


def test_value_without_format_support_uses_str():
    info = QueryValueParameterInfo(TO_STRING, "x", Plain(), "F")

    assert info.serialize() == [("x", "plain-value")]


@pytest.mark.parametrize(
    "value, format_spec, expected",
    [
        (42, None, "42"),
        (3.14159, ".2f", "3.14"),
        (Decimal("1.5"), "08.3f", "0001.500"),
        (date(2024, 1, 2), "%d/%m/%Y", "02/01/2024"),
        (True, None, "True"),
        ("text", "F", "text"),
        (Color.RED, "G", "Color.RED"),
        (Priority.HIGH, "03d", "003"),
    ],
)
def test_format_query_value(value, format_spec, expected):
    assert format_query_value(value, format_spec) == expected


def test_collection_applies_format_per_element():
    info = QueryCollectionParameterInfo(TO_STRING, "t", [Temperature(0), None, Plain()], "F")

    assert info.serialize() == [("t", "32.0F"), ("t", "plain-value")]


def test_custom_strategy_without_serializer_raises_for_scalar():
    info = QueryValueParameterInfo(SERIALIZED, "x", 1)

    with pytest.raises(ArgumentError) as exc_info:
        info.serialize()

    assert exc_info.value.parameter_name == "x"
    with pytest.raises(ArgumentError):
        info.serialize_value(None)


def test_custom_strategy_without_serializer_raises_for_collection():
    info = QueryCollectionParameterInfo(SERIALIZED, "x", [1, 2])

    with pytest.raises(ArgumentError):
        info.serialize()
    with pytest.raises(ArgumentError):
        info.serialize_value(None)


def test_custom_strategy_passes_raw_value_and_format():
    serializer = RecordingSerializer()
    value = {"nested": True}
    info = QueryValueParameterInfo(SERIALIZED, "filter", value, "json")

    pairs = info.serialize(serializer)

    assert pairs == [("FILTER", "<{'nested': True}>")]
    kind, name, raw, context = serializer.calls[0]
    assert kind == "single"
    assert name == "filter"
    assert raw is value
    assert context == RequestQueryParamSerializerInfo(format="json")


def test_custom_strategy_passes_whole_collection():
    serializer = RecordingSerializer()
    values = [1, None, 2]
    info = QueryCollectionParameterInfo(SERIALIZED, "ids", values)

    pairs = info.serialize(serializer)

    assert pairs == [("ids", "1,None,2")]
    assert serializer.calls[0][2] is values


@pytest.mark.parametrize(
    "pairs",
    [
        [],
        [("a", "1"), ("b", "2"), ("a", "3")],
    ],
)
def test_custom_serializer_output_is_unconstrained(pairs):
    info = QueryValueParameterInfo(SERIALIZED, "ignored", 5)

    assert info.serialize(RecordingSerializer(pairs=pairs)) == pairs


def test_default_strategy_ignores_supplied_serializer():
    serializer = RecordingSerializer()
    info = QueryValueParameterInfo(TO_STRING, "x", 7)

    assert info.serialize(serializer) == [("x", "7")]
    assert serializer.calls == []


def test_serialization_method_is_fixed_after_construction():
    info = QueryValueParameterInfo(TO_STRING, "x", 1)

    with pytest.raises(AttributeError):
        info.serialization_method = SERIALIZED
    assert info.serialization_method is TO_STRING


def test_recording_serializer_satisfies_protocol():
    assert isinstance(RecordingSerializer(), RequestQueryParamSerializer)


def test_plain_enum_members_ignore_format_hint():
    info = QueryCollectionParameterInfo(TO_STRING, "c", [Color.RED, Color.RED], "G")

    assert info.serialize() == [("c", "Color.RED"), ("c", "Color.RED")]

"""Tests for JSON-mode ingestion."""

from __future__ import annotations

import json

import pytest

from quiz_author.data_models import QuizRecord
from quiz_author.errors import DecodeError
from quiz_author.ingestion import parse_json, parse_plain_text


def test_invalid_json_raises_decode_error():
    with pytest.raises(DecodeError) as excinfo:
        parse_json("{bad json")

    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)
    assert excinfo.value.lineno == 1


def test_array_is_returned_unvalidated():
    """Test that array items pass through untouched, even when they are not valid questions."""
    payload = [{"subject": "Math", "question": "1+1?", "options": ["2"], "correct": 9}, {"foo": 1}]

    assert parse_json(json.dumps(payload)) == payload


def test_single_object_is_wrapped():
    payload = {"subject": "Math", "question": "1+1?", "options": ["2", "3", "4", "5"], "correct": 0}

    assert parse_json(json.dumps(payload)) == [payload]


@pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"correct": -Infinity}'])
def test_non_standard_constants_are_rejected(text):
    with pytest.raises(DecodeError):
        parse_json(text)


def test_serialized_records_round_trip(khmer_bulk_text):
    """Test that exported records decode to the same payloads and validate to equal records."""
    records = parse_plain_text(khmer_bulk_text, "សេដ្ឋកិច្ច")
    payloads = [record.to_payload() for record in records]

    decoded = parse_json(json.dumps(payloads, ensure_ascii=False))

    assert decoded == payloads
    assert [QuizRecord.from_payload(item) for item in decoded] == records


def test_deeply_nested_json_raises_decode_error():
    text = "[" * 100000 + "]" * 100000

    with pytest.raises(DecodeError, match="nesting too deep"):
        parse_json(text)


def test_leading_byte_order_mark_is_ignored():
    assert parse_json(chr(0xFEFF) + '[{"foo": 1}]') == [{"foo": 1}]


def test_payload_options_are_a_list(sample_record):
    payload = sample_record.to_payload()

    assert payload["options"] == ["Joule", "Newton", "Watt", "Pascal"]
    assert json.loads(json.dumps(payload))["options"] == payload["options"]

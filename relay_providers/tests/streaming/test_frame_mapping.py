"""Frame → event mapping rules."""

from __future__ import annotations

import json

from relay_providers.base.constants import MISSING_CHOICES_ERROR
from relay_providers.base.streaming import ErrorData, EventKind, MessageData, map_frame
from relay_providers.tests.helpers import delta


def _frame(record) -> str:
    return "data: " + (record if isinstance(record, str) else json.dumps(record))


def test_content_delta_becomes_message():
    outcome = map_frame(_frame(delta("Hel")))
    assert outcome.event == (EventKind.MESSAGE, MessageData("Hel"))  # nosec B101
    assert outcome.terminal is False  # nosec B101


def test_missing_content_yields_empty_message():
    outcome = map_frame(_frame(delta(None)))
    assert outcome.event == (EventKind.MESSAGE, MessageData(""))  # nosec B101


def test_role_only_delta_yields_empty_message():
    record = {"choices": [{"delta": {"role": "assistant"}, "finish_reason": None}]}
    assert map_frame(_frame(record)).event == (EventKind.MESSAGE, MessageData(""))  # nosec B101


def test_stop_finish_reason_is_suppressed():
    outcome = map_frame(_frame(delta("ignored", finish_reason="stop")))
    assert outcome.event is None  # nosec B101
    assert outcome.terminal is False  # nosec B101
    assert outcome.reason == "finish_stop"  # nosec B101


def test_other_finish_reason_still_emits_content():
    outcome = map_frame(_frame(delta("tail", finish_reason="length")))
    assert outcome.event == (EventKind.MESSAGE, MessageData("tail"))  # nosec B101


def test_done_sentinel_is_advisory():
    outcome = map_frame("data: [DONE]")
    assert outcome.event is None  # nosec B101
    assert outcome.terminal is False  # nosec B101


def test_empty_frame_is_dropped():
    assert map_frame("data: ").event is None  # nosec B101
    assert map_frame("   ").reason == "empty"  # nosec B101


def test_prefix_without_space_and_surrounding_whitespace():
    outcome = map_frame('  data:{"choices":[{"delta":{"content":"x"}}]}\r\n')
    assert outcome.event == (EventKind.MESSAGE, MessageData("x"))  # nosec B101


def test_record_without_choices_is_fatal():
    outcome = map_frame(_frame({"error": {"message": "quota"}}))
    assert outcome.event == (EventKind.ERROR, ErrorData(MISSING_CHOICES_ERROR))  # nosec B101
    assert outcome.terminal is True  # nosec B101
    assert outcome.reason == "missing_choices"  # nosec B101


def test_empty_choices_is_fatal():
    assert map_frame(_frame({"choices": []})).terminal is True  # nosec B101


def test_undecodable_frame_is_fatal():
    outcome = map_frame("data: {not json")
    assert outcome.event == (EventKind.ERROR, ErrorData(MISSING_CHOICES_ERROR))  # nosec B101
    assert outcome.terminal is True  # nosec B101
    assert outcome.reason == "decode_error"  # nosec B101

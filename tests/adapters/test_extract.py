from __future__ import annotations

import pytest

from youthtracker.adapters.delta import extract_json_object
from youthtracker.domain.errors import ParseError


def test_object_is_cut_out_of_commentary() -> None:
    text = 'Here is the delta:\n```json\n{"noChange": ["A"]}\n```\nLet me know!'

    assert extract_json_object(text) == '{"noChange": ["A"]}'


def test_trailing_braces_are_left_out() -> None:
    text = '{"a": {"b": "closing } in a string"}} Note: {not json}'

    assert extract_json_object(text) == '{"a": {"b": "closing } in a string"}}'


def test_escaped_quotes_do_not_end_strings() -> None:
    text = r'{"detail": "He said \"yes}\""} trailing'

    assert extract_json_object(text) == r'{"detail": "He said \"yes}\""}'


def test_unbalanced_text_falls_back_to_last_brace() -> None:
    text = 'prefix { "a": { "b": 1 } suffix'

    assert extract_json_object(text) == '{ "a": { "b": 1 }'


@pytest.mark.parametrize("text", ["No new intel today.", "} backwards {"])
def test_missing_object_is_a_parse_error(text: str) -> None:
    with pytest.raises(ParseError) as excinfo:
        extract_json_object(text)

    assert excinfo.value.raw_text == text

"""Recovery of the JSON object embedded in free-form upstream output."""

from __future__ import annotations

from youthtracker.domain.errors import ParseError


def extract_json_object(text: str) -> str:
    """Return the substring holding the JSON object in ``text``.

    The span starts at the first ``{`` and ends at the brace that balances
    it, ignoring braces inside JSON string literals, so trailing commentary
    containing braces is left out. When the braces never balance, the span
    falls back to the last ``}`` in the text. Raises ``ParseError`` when no
    ``{...}`` span exists at all.
    """

    start = text.find("{")
    if start == -1:
        raise ParseError("No JSON object found in upstream response", raw_text=text)

    end = _balanced_end(text, start)
    if end is None:
        end = text.rfind("}")
        if end < start:
            raise ParseError("No JSON object found in upstream response", raw_text=text)
    return text[start : end + 1]


def _balanced_end(text: str, start: int) -> int | None:
    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return None

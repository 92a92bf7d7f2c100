"""JSON extraction and repair for Gemini responses.

Schema-constrained responses are normally clean JSON, but the model can still
wrap the object in code fences or leave a trailing comma. The helpers here
locate the outermost object, decode it strictly, and fall back to
``json_repair`` only for cosmetic faults. A fragment whose brackets or strings
are left open (a truncated response) is rejected, never repaired.
"""

from __future__ import annotations

import json
from typing import Any

from json_repair import repair_json

_CLOSERS = {"{": "}", "[": "]"}


def _is_complete(fragment: str) -> bool:
    """Return True when every string, object and array in ``fragment`` is closed."""
    stack: list[str] = []
    in_string = False
    escaped = False
    for char in fragment:
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
        elif char in _CLOSERS:
            stack.append(_CLOSERS[char])
        elif char in ("}", "]"):
            if not stack or stack.pop() != char:
                return False
    return not stack and not in_string


def parse_json_object(text: str) -> dict[str, Any]:
    """Extract and decode the JSON object contained in ``text``.

    Args:
        text: The response text returned by the model.

    Returns:
        The decoded object.

    Raises:
        ValueError: If ``text`` is empty, has no object delimiters, is
            truncated, or does not decode to a JSON object.
        json.JSONDecodeError: If the repaired fragment still cannot be parsed.

    Example:
        >>> parse_json_object('```json\\n{"summary": "ok",}\\n```')
        {'summary': 'ok'}
    """
    if not isinstance(text, str):
        raise ValueError(f"Expected string input, got {type(text)}")
    if not text.strip():
        raise ValueError("Response text is empty.")

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        raise ValueError("Response text does not contain a JSON object.")

    fragment = text[start : end + 1]
    if not _is_complete(fragment):
        raise ValueError("Response text is truncated or has unbalanced brackets.")

    try:
        decoded = json.loads(fragment)
    except json.JSONDecodeError:
        decoded = json.loads(repair_json(fragment))
    if not isinstance(decoded, dict):
        raise ValueError(
            f"Expected a JSON object, got {type(decoded).__name__}."
        )
    return decoded

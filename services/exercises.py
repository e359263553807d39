"""Parsing and schema filtering of model-generated syllable exercises."""

import json
import re
from typing import Any, Dict, List

from server import config


def parse_json(text: str) -> Any:
    """Parse JSON from a model reply, tolerating code fences and stray prose."""
    if not text:
        return None
    # Direct parse
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass
    # Code-block extraction
    m = re.search(r"```(?:json)?\s*([\s\S]*?)```", text)
    if m:
        try:
            return json.loads(m.group(1).strip())
        except json.JSONDecodeError:
            pass
    # Find first JSON array or object
    m = re.search(r"(\[[\s\S]*\]|\{[\s\S]*\})", text)
    if m:
        try:
            return json.loads(m.group(1))
        except json.JSONDecodeError:
            pass
    return None


def normalize_count(raw: Any, default: int = config.DEFAULT_EXERCISE_COUNT) -> int:
    """Requested exercise count as a non-negative int; junk falls back to the default."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        count = int(raw)
    except (TypeError, ValueError, OverflowError):
        return default
    return max(count, 0)


def _candidates(payload: Any) -> List[Any]:
    # bare array, or {"exercises": [...]} / {"data": [...]}
    if isinstance(payload, dict):
        payload = payload.get("exercises") or payload.get("data") or []
    return payload if isinstance(payload, list) else []


def filter_exercises(payload: Any, count: int) -> List[Dict[str, Any]]:
    """
    Keep entries with a non-empty syllable and exactly two non-empty string
    letters, at most `count` of them. A missing hint is rebuilt from the letters.
    """
    safe: List[Dict[str, Any]] = []
    for item in _candidates(payload):
        if len(safe) >= count:
            break
        if not isinstance(item, dict):
            continue
        syllable = item.get("syllable")
        letters = item.get("letters")
        if not isinstance(syllable, str) or not syllable.strip():
            continue
        if not isinstance(letters, list) or len(letters) != 2:
            continue
        if not all(isinstance(l, str) and l.strip() for l in letters):
            continue
        hint = item.get("hint")
        if not isinstance(hint, str) or not hint.strip():
            hint = f"{letters[0]} + {letters[1]}"
        safe.append({"syllable": syllable, "letters": letters, "hint": hint})
    return safe

"""Parse model replies and reconcile them with local suggestions."""

from __future__ import annotations

import re

MAX_AI_SUGGESTIONS = 2

_GROUP_RE = re.compile(r"(\d{2}[A-Z]{3}(\s*\([^)]+\))?)", re.IGNORECASE)
_CODE_RE = re.compile(r"^([A-Z0-9]+)", re.IGNORECASE)


def parse_ai_response(response: str, field: str) -> list[str]:
    """One candidate per non-blank line, de-duplicated, at most two.

    Material groups keep an optional '(DESCRIPTION)' suffix; other fields
    keep the leading alphanumeric token. Lines without a match are kept
    whole (stripped).
    """
    pattern = _GROUP_RE if field == "materialGroup" else _CODE_RE
    suggestions: list[str] = []
    for line in response.splitlines():
        line = line.strip()
        if not line:
            continue
        match = pattern.search(line) if field == "materialGroup" else pattern.match(line)
        candidate = match.group(0).strip() if match else line
        if candidate not in suggestions:
            suggestions.append(candidate)
    return suggestions[:MAX_AI_SUGGESTIONS]


def filter_against_local(ai_suggestions: list[str], local_suggestions: list[str]) -> list[str]:
    """Keep model picks that overlap a local suggestion; fall back to local when none do.

    Overlap is a case-insensitive substring test in either direction.
    """
    valid = [
        suggestion
        for suggestion in ai_suggestions
        if any(
            local.lower() in suggestion.lower() or suggestion.lower() in local.lower()
            for local in local_suggestions
        )
    ]
    return valid if valid else list(local_suggestions)

"""Placeholder interpolation for message templates.

Templates mark substitution points with double curly braces:

    "Apontamento - {{window}}"   -> "Apontamento - 09:00"
    "{{ count }} ag."            -> "3 ag."

Scanning is an explicit single pass (no regular expressions):
    1. Find the next "{{"
    2. Capture up to the first following "}}"
    3. Trim the captured name and emit a Placeholder element
    4. Resume after the closing "}}" (matches never overlap)

An opening "{{" whose body would cross a line break before its "}}" is
ordinary text, and scanning resumes after that line break.

Substitution rules:
    - values is None           -> template returned verbatim
    - empty trimmed name       -> matched text kept
    - name absent or None      -> matched text kept
    - otherwise                -> whole match replaced by the value's string form
Substituted text is never re-scanned.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from keyglot.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_LINE_BREAKS, PLACEHOLDER_OPEN
from keyglot.runtime.value_types import MessageValue, to_display_string

__all__ = [
    "Placeholder",
    "TemplateElement",
    "TextSegment",
    "interpolate",
    "scan_template",
    "substitute",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TextSegment:
    """Literal run of template text."""

    text: str


@dataclass(frozen=True, slots=True)
class Placeholder:
    """One {{ name }} occurrence.

    Attributes:
        raw: Exact matched text, braces included (kept when not substituted)
        name: Name with surrounding whitespace trimmed (may be empty)
    """

    raw: str
    name: str


type TemplateElement = TextSegment | Placeholder


def _first_line_break(text: str) -> int:
    """Index of the first line break in text, or -1."""
    for index, char in enumerate(text):
        if char in PLACEHOLDER_LINE_BREAKS:
            return index
    return -1


@functools.lru_cache(maxsize=1024)
def scan_template(template: str) -> tuple[TemplateElement, ...]:
    """Split a template into text segments and placeholders.

    Args:
        template: Message template

    Returns:
        Immutable tuple of elements; concatenating every element's text
        (TextSegment.text / Placeholder.raw) reproduces the template.

    Example:
        >>> scan_template("Oi {{ nome }}!")
        (TextSegment(text='Oi '), Placeholder(raw='{{ nome }}', name='nome'), TextSegment(text='!'))
    """
    elements: list[TemplateElement] = []
    text_start = 0
    pos = 0

    while True:
        open_at = template.find(PLACEHOLDER_OPEN, pos)
        if open_at == -1:
            break
        body_start = open_at + len(PLACEHOLDER_OPEN)
        close_at = template.find(PLACEHOLDER_CLOSE, body_start)
        if close_at == -1:
            break

        body = template[body_start:close_at]
        line_break = _first_line_break(body)
        if line_break != -1:
            # No "{{" before this line break can reach a "}}" on the same line.
            pos = body_start + line_break + 1
            continue

        if open_at > text_start:
            elements.append(TextSegment(template[text_start:open_at]))
        end = close_at + len(PLACEHOLDER_CLOSE)
        elements.append(Placeholder(raw=template[open_at:end], name=body.strip()))
        text_start = pos = end

    if text_start < len(template):
        elements.append(TextSegment(template[text_start:]))
    return tuple(elements)


def substitute(
    template: str, values: Mapping[str, MessageValue] | None
) -> tuple[str, tuple[str, ...]]:
    """Interpolate values and report which placeholders were left in place.

    Args:
        template: Message template
        values: Placeholder values, or None to skip substitution entirely

    Returns:
        Tuple of (result, unresolved_names). unresolved_names lists, in
        template order, the non-empty names that were absent or None.
        It is always empty when values is None.
    """
    if values is None:
        return template, ()

    parts: list[str] = []
    unresolved: list[str] = []
    for element in scan_template(template):
        match element:
            case TextSegment(text=text):
                parts.append(text)
            case Placeholder(raw=raw, name=""):
                parts.append(raw)
            case Placeholder(raw=raw, name=name):
                value = values.get(name)
                if value is None:
                    logger.debug("Placeholder '%s' left unsubstituted", name)
                    unresolved.append(name)
                    parts.append(raw)
                else:
                    parts.append(to_display_string(value))
    return "".join(parts), tuple(unresolved)


def interpolate(template: str, values: Mapping[str, MessageValue] | None = None) -> str:
    """Substitute {{placeholder}} slots in a template.

    Args:
        template: Message template
        values: Placeholder values (str, int, float, Decimal, or None)

    Returns:
        Interpolated string. Never raises for missing or None values.

    Examples:
        >>> interpolate("Apontamento - {{window}}", {"window": "09:00"})
        'Apontamento - 09:00'
        >>> interpolate("{{a}} {{b}}", {"a": "X"})
        'X {{b}}'
        >>> interpolate("{{name}}")
        '{{name}}'
    """
    result, _ = substitute(template, values)
    return result

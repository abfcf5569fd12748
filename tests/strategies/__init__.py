"""Hypothesis strategies for keyglot property-based testing.

Usage:
    from tests.strategies import message_bundles, templates, key_segments
"""

from .messages import (
    KEY_SEGMENT_CHARS,
    dotted_keys,
    key_segments,
    message_bundles,
    message_texts,
    placeholder_names,
    placeholder_values,
    templates,
)

__all__ = [
    "KEY_SEGMENT_CHARS",
    "dotted_keys",
    "key_segments",
    "message_bundles",
    "message_texts",
    "placeholder_names",
    "placeholder_values",
    "templates",
]

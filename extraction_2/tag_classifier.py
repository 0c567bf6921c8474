"""Keyword tagging against the fixed tag catalogue."""

from typing import Tuple

from config.legal_tables import TAG_CATALOGUE


def classify_tags(text: str, catalogue=TAG_CATALOGUE) -> Tuple[str, ...]:
    """
    Apply the tag catalogue to a text.

    A tag is included iff its pattern matches anywhere in the text. Output
    follows catalogue order and holds each tag once.
    """
    tags = []
    for tag, pattern in catalogue:
        if tag not in tags and pattern.search(text):
            tags.append(tag)
    return tuple(tags)


def tag_entry(title: str, content: str, catalogue=TAG_CATALOGUE) -> Tuple[str, ...]:
    """Tags for an entry, evaluated over title and content together."""
    return classify_tags(f"{title} {content}", catalogue)

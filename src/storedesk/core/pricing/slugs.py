from __future__ import annotations

import re
import unicodedata
from typing import Any

DISALLOWED_PATTERN = re.compile(r"[^a-z0-9\s-]")
WHITESPACE_PATTERN = re.compile(r"\s+")
HYPHEN_RUN_PATTERN = re.compile(r"-+")
SLUG_PATTERN = re.compile(r"[a-z0-9]+(?:-[a-z0-9]+)*")


def generate_slug(title: Any) -> str:
    if not title or not isinstance(title, str):
        return ""

    slug = title.lower().strip()
    decomposed = unicodedata.normalize("NFD", slug)
    slug = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    slug = DISALLOWED_PATTERN.sub("", slug)
    slug = WHITESPACE_PATTERN.sub("-", slug)
    slug = HYPHEN_RUN_PATTERN.sub("-", slug)
    return slug.strip("-")


def is_valid_slug(slug: Any) -> bool:
    if not slug or not isinstance(slug, str):
        return False
    return SLUG_PATTERN.fullmatch(slug) is not None

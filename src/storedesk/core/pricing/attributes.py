from __future__ import annotations

from typing import Mapping

PAIR_SEPARATOR = "|"
KEY_VALUE_SEPARATOR = ":"


def _name_order(item: tuple[str, str]) -> tuple[str, str]:
    # Case-insensitive first, lowercase before uppercase on ties.
    return item[0].casefold(), item[0].swapcase()


def generate_attribute_key(attributes: Mapping[str, str]) -> str:
    """Canonical lookup key for a variant price matrix, e.g. ``color:red|Size:m``."""
    return PAIR_SEPARATOR.join(
        f"{key}{KEY_VALUE_SEPARATOR}{value}" for key, value in sorted(attributes.items(), key=_name_order)
    )


def parse_attribute_key(attribute_key: str) -> dict[str, str]:
    attributes: dict[str, str] = {}
    for pair in attribute_key.split(PAIR_SEPARATOR):
        parts = pair.split(KEY_VALUE_SEPARATOR)
        if len(parts) < 2:
            continue
        key, value = parts[0], parts[1]
        if key and value:
            attributes[key] = value
    return attributes

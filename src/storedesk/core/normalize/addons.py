from __future__ import annotations

import json
import logging
from typing import Any, Iterable, Mapping

from storedesk.core.pricing import sanitize_price

from .fields import optional_str, to_quantity
from .models import AddonCatalogEntry, AddonSelection

logger = logging.getLogger(__name__)


class AddonPayloadError(ValueError):
    """Raised when a stored addon payload can not be read as a list of selections."""


def parse_addon_payload(raw: Any) -> list[Mapping[str, Any]]:
    """
    Addon selections are stored in one of three shapes: a JSON-encoded string,
    a single object, or a list of objects. All of them become a list of mappings.
    """
    if raw is None or raw == "" or raw == [] or raw == {}:
        return []

    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")

    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise AddonPayloadError(f"Addon payload is not valid JSON: {exc}") from exc
        if not isinstance(decoded, list):
            return []
        return [entry for entry in decoded if isinstance(entry, Mapping)]

    if isinstance(raw, Mapping):
        return [raw]

    if isinstance(raw, (list, tuple)):
        return [entry for entry in raw if isinstance(entry, Mapping)]

    raise AddonPayloadError(f"Unsupported addon payload type: {type(raw).__name__}")


def addon_from_payload(payload: Mapping[str, Any]) -> AddonSelection:
    return AddonSelection(
        addon_id=optional_str(payload.get("addonId") or payload.get("id")),
        addon_title=optional_str(payload.get("addonTitle")),
        title=optional_str(payload.get("title")),
        name=optional_str(payload.get("name")),
        price=sanitize_price(payload.get("price")),
        quantity=to_quantity(payload.get("quantity")),
    )


def load_addons(raw: Any) -> list[AddonSelection]:
    try:
        entries = parse_addon_payload(raw)
    except AddonPayloadError as exc:
        logger.warning("Addon payload skipped: %s", exc)
        return []
    return [addon_from_payload(entry) for entry in entries]


def index_addon_catalog(entries: Iterable[Mapping[str, Any]]) -> dict[str, AddonCatalogEntry]:
    catalog: dict[str, AddonCatalogEntry] = {}
    for entry in entries:
        addon_id = optional_str(entry.get("id"))
        if addon_id is None:
            continue
        catalog[addon_id] = AddonCatalogEntry(
            id=addon_id,
            title=optional_str(entry.get("title")),
            price=sanitize_price(entry.get("price")),
        )
    return catalog


def resolve_addon_title(
    addon: AddonSelection,
    catalog: Mapping[str, AddonCatalogEntry],
    index: int,
) -> str:
    for embedded in (addon.addon_title, addon.title, addon.name):
        if embedded:
            return embedded

    if addon.addon_id and catalog:
        entry = catalog.get(addon.addon_id)
        if entry is not None and entry.title:
            return entry.title

    return f"Addon {index + 1}"


def addons_subtotal(addons: Iterable[AddonSelection]) -> float:
    return round(sum(addon.line_total for addon in addons), 2)

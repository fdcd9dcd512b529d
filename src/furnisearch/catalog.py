"""Catalog loading and flattening of the storefront category tree."""

from __future__ import annotations

import json
import logging
from importlib.resources import files
from pathlib import Path
from typing import Any, Iterable, List, Mapping

from furnisearch.models import CatalogItem

LOGGER = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "name", "category", "subcategory")


class CatalogError(ValueError):
    """Raised when catalog data cannot be turned into catalog items."""


def item_from_dict(
    data: Mapping[str, Any],
    *,
    category: str | None = None,
    subcategory: str | None = None,
) -> CatalogItem:
    """Build a catalog item from a product record.

    ``category`` and ``subcategory`` override the record's own values, which
    is how products nested in the category tree get their group labels.
    """
    record = dict(data)
    if category is not None:
        record["category"] = category
    if subcategory is not None:
        record["subcategory"] = subcategory

    missing = [key for key in REQUIRED_FIELDS if record.get(key) is None]
    if missing:
        raise CatalogError(f"Product record is missing {', '.join(missing)}: {dict(data)!r}")

    description = record.get("description")
    if description is not None and not isinstance(description, str):
        raise CatalogError(f"Product description must be text: {dict(data)!r}")

    is_new = record.get("isNew", record.get("is_new", False))
    if not isinstance(is_new, bool):
        raise CatalogError(f"Product isNew flag must be true or false: {dict(data)!r}")

    return CatalogItem(
        id=record["id"],
        name=str(record["name"]),
        category=str(record["category"]),
        subcategory=str(record["subcategory"]),
        description=description or "",
        image=record.get("image"),
        is_new=is_new,
    )


def flatten_categories(tree: Iterable[Mapping[str, Any]]) -> List[CatalogItem]:
    """Flatten a category -> subcategory -> product tree into catalog items."""
    items: List[CatalogItem] = []
    for category in tree:
        for subcategory in category.get("subcategories", []):
            for product in subcategory.get("products", []):
                items.append(
                    item_from_dict(
                        product,
                        category=category["name"],
                        subcategory=subcategory["name"],
                    )
                )
    return items


def _is_category_tree(records: List[Any]) -> bool:
    return bool(records) and all(
        isinstance(record, Mapping) and "subcategories" in record for record in records
    )


def parse_catalog(payload: Any) -> List[CatalogItem]:
    """Turn decoded JSON (category tree or flat product list) into items."""
    if isinstance(payload, Mapping):
        payload = payload.get("categories", payload.get("products"))
    if not isinstance(payload, list):
        raise CatalogError("Catalog must be a list of categories or products")

    try:
        if _is_category_tree(payload):
            return flatten_categories(payload)
        return [item_from_dict(record) for record in payload]
    except (KeyError, TypeError, AttributeError) as exc:
        raise CatalogError(f"Malformed catalog record: {exc}") from exc


def _read_default_catalog() -> str:
    resource = files("furnisearch").joinpath("data", "catalog.json")
    return resource.read_text(encoding="utf-8")


def load_catalog(path: Path | None = None) -> List[CatalogItem]:
    """Load a catalog snapshot from ``path`` or the bundled storefront data."""
    if path is None:
        raw = _read_default_catalog()
        source = "bundled catalog"
    else:
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"Unable to read catalog {path}: {exc}") from exc
        source = str(path)

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Invalid JSON in {source}: {exc}") from exc

    items = parse_catalog(payload)
    LOGGER.debug("Loaded %d items from %s", len(items), source)
    return items

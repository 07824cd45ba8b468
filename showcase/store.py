# showcase/store.py
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .logger import get_logger
from .models import Item, ItemImage, Offer, Owner

logger = get_logger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_CATALOG_PATH = DATA_DIR / "catalog.json"
DEFAULT_OFFERS_PATH = DATA_DIR / "offers.json"


def _load_records(path: str | Path, kind: str) -> List[Dict[str, Any]]:
    if not os.path.exists(path):
        logger.error("%s data file not found at %s", kind.capitalize(), path)
        raise SystemExit(1)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Failed to load %s data at %s: %s", kind, path, e)
        raise SystemExit(1)

    if not isinstance(data, list):
        logger.error("%s data at %s must be a JSON list.", kind.capitalize(), path)
        raise SystemExit(1)

    records = []
    for idx, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.error("Invalid %s entry #%d (not an object): %r", kind, idx, entry)
            continue
        records.append(entry)
    return records


def _text(raw: Dict[str, Any], key: str, where: str) -> str:
    if key not in raw or raw[key] is None:
        logger.warning("Missing '%s' in %s; rendering it empty.", key, where)
        return ""
    return str(raw[key])


def _image(raw: Any) -> Optional[ItemImage]:
    if not raw:
        return None
    if isinstance(raw, str):
        return ItemImage(src=raw)
    if isinstance(raw, dict):
        image = ItemImage(
            src=str(raw.get("src") or ""),
            alt=str(raw.get("alt") or ""),
            emoji=str(raw.get("emoji") or ""),
        )
        return image if (image.src or image.emoji) else None
    logger.warning("Unsupported image value %r; ignoring it.", raw)
    return None


def parse_item(raw: Dict[str, Any], where: str = "item") -> Item:
    owner_raw = raw.get("owner")
    if not isinstance(owner_raw, dict):
        logger.warning("Missing 'owner' in %s; rendering it empty.", where)
        owner_raw = {}
    owner_where = f"{where}.owner"
    owner = Owner(
        initials=_text(owner_raw, "initials", owner_where),
        name=_text(owner_raw, "name", owner_where),
        rating=owner_raw.get("rating", 0),
        stars=owner_raw.get("stars", 0),
    )
    return Item(
        title=_text(raw, "title", where),
        description=_text(raw, "description", where),
        owner=owner,
        image=_image(raw.get("image")),
    )


def parse_offer(raw: Dict[str, Any], where: str = "offer") -> Offer:
    return Offer(
        id=_text(raw, "id", where),
        object_name=_text(raw, "object", where),
        description=_text(raw, "description", where),
        offered_by=_text(raw, "offeredBy", where),
    )


def load_catalog(path: str | Path = DEFAULT_CATALOG_PATH) -> Tuple[Item, ...]:
    """
    Read the product catalog from a JSON list of item objects.
    Order in the file is the rendering order.
    """
    records = _load_records(path, "catalog")
    items = tuple(parse_item(r, f"catalog item #{i}") for i, r in enumerate(records))
    logger.info("Loaded %d catalog items from %s", len(items), path)
    return items


def load_offers(path: str | Path = DEFAULT_OFFERS_PATH) -> Tuple[Offer, ...]:
    records = _load_records(path, "offers")
    offers = tuple(parse_offer(r, f"offer #{i}") for i, r in enumerate(records))
    ids = [o.id for o in offers]
    if len(set(ids)) != len(ids):
        logger.debug("Duplicate offer ids in %s: %s", path, ids)
    logger.info("Loaded %d offers from %s", len(offers), path)
    return offers

# showcase/models.py
from dataclasses import dataclass
from typing import Optional

from markupsafe import escape


@dataclass(frozen=True)
class ItemImage:
    """
    Pre-sanitized visual for a catalog item.
    Either a picture (src/alt) or a single emoji icon; attribute values
    and emoji text are escaped when turned into markup.
    """
    src: str = ""
    alt: str = ""
    emoji: str = ""

    def to_html(self) -> str:
        if self.src:
            return f'<img src="{escape(self.src)}" alt="{escape(self.alt)}">'
        if self.emoji:
            return str(escape(self.emoji))
        return ""


@dataclass(frozen=True)
class Owner:
    initials: str
    name: str
    # rating and stars are supplied independently; neither is derived from the other
    rating: float = 0.0
    stars: int = 0


@dataclass(frozen=True)
class Item:
    """
    One tradeable product in the catalog.
    """
    title: str
    description: str
    owner: Owner
    image: Optional[ItemImage] = None


@dataclass(frozen=True)
class Offer:
    """
    One entry of the simple trade-offer list.
    """
    id: str
    object_name: str
    description: str
    offered_by: str

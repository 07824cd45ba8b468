import os
from typing import Any, Dict, List, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from showcase.dom import replace_content, select_container
from showcase.logger import get_logger
from showcase.models import Item
from showcase.templating import render_template

from .stars import render_stars

logger = get_logger(__name__)

CATALOG_SELECTOR = os.getenv("CATALOG_SELECTOR", ".products")
TRADE_BUTTON_LABEL = "💱 Proponer Intercambio"


def _item_context(it: Item) -> Dict[str, Any]:
    # Text fields go in verbatim; only the typed image is turned into markup here.
    return {
        "image_html": it.image.to_html() if it.image else "",
        "title": it.title,
        "description": it.description,
        "initials": it.owner.initials,
        "owner_name": it.owner.name,
        "stars_html": render_stars(it.owner.stars, it.owner.rating),
    }


def build_catalog_html(items: Sequence[Item]) -> str:
    """
    Markup for the whole catalog: one div.product block per item, in order.
    An empty sequence gives an empty string.
    """
    items_data: List[Dict[str, Any]] = [_item_context(it) for it in items]
    return render_template(
        "catalog.html", items=items_data, trade_label=TRADE_BUTTON_LABEL
    )


def render(container: Tag, items: Sequence[Item]) -> None:
    """Replace everything inside container with the rendered catalog."""
    replace_content(container, build_catalog_html(items))
    logger.info("Rendered %d catalog items.", len(items))


def mount(page: BeautifulSoup, items: Sequence[Item], selector: str = CATALOG_SELECTOR) -> Tag:
    container = select_container(page, selector)
    render(container, items)
    return container

# renderers/offers.py
import os
from typing import Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from showcase.dom import container_by_id, new_element
from showcase.logger import get_logger
from showcase.models import Offer

logger = get_logger(__name__)

OFFERS_CONTAINER_ID = os.getenv("OFFERS_CONTAINER_ID", "offer-list")


def build_offer_text(offer: Offer) -> str:
    return f"{offer.object_name} - {offer.description} (Ofertado por: {offer.offered_by})"


def render(container: Tag, offers: Sequence[Offer]) -> None:
    """Clear container, then append one <li> per offer in order."""
    container.clear()
    for offer in offers:
        container.append(new_element("li", build_offer_text(offer)))
    logger.info("Rendered %d offers.", len(offers))


def mount(page: BeautifulSoup, offers: Sequence[Offer], element_id: str = OFFERS_CONTAINER_ID) -> Tag:
    container = container_by_id(page, element_id)
    render(container, offers)
    return container

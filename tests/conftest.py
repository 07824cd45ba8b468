"""
Pytest configuration: puts the project root on sys.path and provides
small record sets and page shells for the renderer tests.
"""
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from showcase.dom import parse_page  # noqa: E402
from showcase.models import Item, ItemImage, Offer, Owner  # noqa: E402


@pytest.fixture
def items():
    return (
        Item(
            title="Auriculares QCY H2 PRO",
            description="Auriculares inalámbricos",
            owner=Owner(initials="MG", name="María González", rating=4.8, stars=5),
            image=ItemImage(src="img/QCYH2PRO.png", alt="QCYH2PRO"),
        ),
        Item(
            title="Smartphone Android",
            description="Teléfono en excelente estado",
            owner=Owner(initials="CR", name="Carlos Rodriguez", rating=2.8, stars=3),
        ),
    )


@pytest.fixture
def offers():
    return (
        Offer(id="1", object_name="Laptop", description="Laptop en buen estado", offered_by="Juan"),
        Offer(id="2", object_name="Smartphone", description="Pantalla de 6 pulgadas", offered_by="Ana"),
    )


@pytest.fixture
def page():
    return parse_page(
        '<html><body><div class="products"><p>old</p></div>'
        '<ul id="offer-list"><li>stale</li></ul></body></html>'
    )

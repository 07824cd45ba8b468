# renderers/__init__.py
from showcase import store

from . import catalog
from . import offers

RENDERERS = {
    "catalog": catalog.mount,
    "offers": offers.mount,
}

LOADERS = {
    "catalog": store.load_catalog,
    "offers": store.load_offers,
}

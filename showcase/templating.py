import os
import re
from pathlib import Path
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader

# Resolve template directory relative to this file
TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))

SHELL_CATALOG_CLASS = "products"

PAGE_TITLE = os.getenv("PAGE_TITLE", "Productos para intercambiar")

PAGE_THEME = os.getenv("PAGE_THEME", "light").strip().lower()
if PAGE_THEME not in ("light", "dark"):
    PAGE_THEME = "light"

THEMES = {
    "light": {
        "page_bg": "#f5f5f5",
        "card_bg": "#ffffff",
        "card_border": "#e0e0e0",
        "text_primary": "#202124",
        "text_secondary": "#555",
        "accent": "#1a73e8",
        "star_filled": "#f5b301",
        "star_empty": "#cccccc",
    },
    "dark": {
        "page_bg": "#121212",
        "card_bg": "#1E1E1E",
        "card_border": "#333333",
        "text_primary": "#F1F1F1",
        "text_secondary": "#BBBBBB",
        "accent": "#8AB4F8",
        "star_filled": "#FFC107",
        "star_empty": "#555555",
    },
}


def render_template(name: str, **ctx: Any) -> str:
    return env.get_template(name).render(**ctx)


_SIMPLE_SELECTOR = re.compile(r"^(?P<tag>[A-Za-z][\w-]*)?(?P<rest>(?:[#.][\w-]+)*)$")
_SELECTOR_PART = re.compile(r"([#.])([\w-]+)")


def mount_from_selector(selector: str) -> Dict[str, Any]:
    """
    Split a compound selector such as "section#catalog.products.grid"
    into the tag, id and classes of an element it matches.
    Combinators, attributes and pseudo-classes raise ValueError.
    """
    match = _SIMPLE_SELECTOR.match(selector.strip())
    if not match or not selector.strip():
        raise ValueError(f"Unsupported container selector {selector!r}")

    element_id = None
    classes: List[str] = [SHELL_CATALOG_CLASS]
    for kind, name in _SELECTOR_PART.findall(match.group("rest")):
        if kind == "#":
            if element_id is not None and element_id != name:
                raise ValueError(f"Selector {selector!r} names two ids")
            element_id = name
        elif name not in classes:
            classes.append(name)

    return {
        "tag": (match.group("tag") or "div").lower(),
        "id": element_id,
        "classes": " ".join(classes),
    }


def build_page_shell(
    catalog_selector: str,
    offers_container_id: str,
    theme: str = PAGE_THEME,
    title: str = PAGE_TITLE,
) -> str:
    """
    Render the bundled page shell holding both mount points.
    The catalog mount is built to match catalog_selector and always
    carries the "products" class the stylesheet targets.
    """
    colors = THEMES.get(theme, THEMES["light"])
    ctx: Dict[str, Any] = {
        "title": title,
        "colors": colors,
        "catalog_mount": mount_from_selector(catalog_selector),
        "offers_container_id": offers_container_id,
    }
    return render_template("index.html", **ctx)

import os
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from showcase.dom import ContainerNotFoundError, parse_page
from showcase.logger import get_logger
from showcase import store
from showcase.templating import build_page_shell
from renderers import LOADERS, RENDERERS
from renderers.catalog import CATALOG_SELECTOR
from renderers.offers import OFFERS_CONTAINER_ID

logger = get_logger(__name__)

MODE = os.getenv("MODE", "all").lower()  # "catalog", "offers" or "all"
CATALOG_PATH = os.getenv("CATALOG_PATH", str(store.DEFAULT_CATALOG_PATH))
OFFERS_PATH = os.getenv("OFFERS_PATH", str(store.DEFAULT_OFFERS_PATH))
OUTPUT_PATH = os.getenv("OUTPUT_PATH", "build/index.html")
PAGE_SHELL_PATH = os.getenv("PAGE_SHELL_PATH", "").strip()

MODES = {
    "catalog": ["catalog"],
    "offers": ["offers"],
    "all": ["catalog", "offers"],
}

CONTAINERS = {
    "catalog": CATALOG_SELECTOR,
    "offers": OFFERS_CONTAINER_ID,
}


def load_page_shell(path: Optional[str] = None) -> str:
    if path is None:
        path = PAGE_SHELL_PATH
    if not path:
        try:
            return build_page_shell(CATALOG_SELECTOR, OFFERS_CONTAINER_ID)
        except ValueError as e:
            logger.error("Cannot build the page shell for CATALOG_SELECTOR: %s", e)
            raise SystemExit(1)
    if not os.path.exists(path):
        logger.error("Page shell not found at %s", path)
        raise SystemExit(1)
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def renderers_for(mode: str) -> List[str]:
    names = MODES.get(mode)
    if names is None:
        logger.error("Unknown MODE '%s'; expected one of %s.", mode, sorted(MODES))
        raise SystemExit(1)
    return names


def build_page(
    shell_html: str,
    records: Dict[str, Sequence],
    containers: Optional[Dict[str, str]] = None,
) -> str:
    """
    Run each named renderer once against its own container of the shell
    and return the finished page. A missing container aborts with
    ContainerNotFoundError.
    """
    containers = containers or CONTAINERS
    page = parse_page(shell_html)
    for name, data in records.items():
        RENDERERS[name](page, data, containers[name])
    return str(page)


def write_page(html: str, path: str = OUTPUT_PATH) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    logger.info("Wrote page to %s (%d bytes).", out, len(html.encode("utf-8")))


def run(mode: str = MODE, output_path: str = OUTPUT_PATH) -> int:
    names = renderers_for(mode)
    paths = {"catalog": CATALOG_PATH, "offers": OFFERS_PATH}
    records = {name: LOADERS[name](paths[name]) for name in names}

    shell_html = load_page_shell()
    try:
        html = build_page(shell_html, records)
    except ContainerNotFoundError as e:
        logger.exception("Render aborted: %s", e)
        return 2

    write_page(html, output_path)
    return 0


def _main(mode: str) -> None:
    try:
        raise SystemExit(run(mode))
    except SystemExit:
        raise
    except Exception as e:
        logger.exception("Fatal render error: %s", e)
        raise SystemExit(2)


def main() -> None:
    _main(MODE)


def main_catalog() -> None:
    _main("catalog")


def main_offers() -> None:
    _main("offers")


if __name__ == "__main__":
    main()

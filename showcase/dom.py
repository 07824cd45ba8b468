# showcase/dom.py
from bs4 import BeautifulSoup
from bs4.element import Tag

PARSER = "html.parser"


class ContainerNotFoundError(LookupError):
    """Raised when a page has no element matching a renderer's mount point."""

    def __init__(self, lookup: str):
        super().__init__(f"No container matches {lookup}")
        self.lookup = lookup


def parse_page(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, PARSER)


def select_container(page: BeautifulSoup, selector: str) -> Tag:
    container = page.select_one(selector)
    if container is None:
        raise ContainerNotFoundError(f"selector {selector!r}")
    return container


def container_by_id(page: BeautifulSoup, element_id: str) -> Tag:
    container = page.find(id=element_id)
    if not isinstance(container, Tag):
        raise ContainerNotFoundError(f"id {element_id!r}")
    return container


def replace_content(container: Tag, html: str) -> None:
    """
    Swap the whole content of container for the parsed html.
    The fragment is parsed before anything is touched, so a parse
    problem leaves the container as it was.
    """
    fragment = BeautifulSoup(html, PARSER)
    nodes = list(fragment.contents)
    container.clear()
    for node in nodes:
        container.append(node.extract())


def inner_html(container: Tag) -> str:
    return container.decode_contents()


def new_element(name: str, text: str | None = None) -> Tag:
    element = BeautifulSoup("", PARSER).new_tag(name)
    if text is not None:
        element.string = text
    return element

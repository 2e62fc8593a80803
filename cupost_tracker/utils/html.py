import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

BR_TAG_PATTERN = re.compile(r"<br\s*/?>", re.IGNORECASE)
WHITESPACE_PATTERN = re.compile(r"\s+")


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def element_text(element: Optional[Tag]) -> str:
    """Trimmed text of an element, empty when the element is missing."""
    if element is None:
        return ""
    return element.get_text().strip()


def select_text(root: Tag, selector: str, first: bool = True) -> str:
    """
    Trimmed text of the elements matching ``selector`` under ``root``.

    With ``first`` only the first match is read, otherwise the text of all
    matches is concatenated.
    """
    if first:
        return element_text(root.select_one(selector))
    return "".join(match.get_text() for match in root.select(selector)).strip()


def ancestor(element: Tag, depth: int) -> Optional[Tag]:
    current = element
    for _ in range(depth):
        if current is None:
            return None
        current = current.parent
    return current


def find_labelled_containers(
    root: Tag, label: str, depth: int, tag: str = "span"
) -> List[Tag]:
    """
    Find containers that hold a label element.

    Every ``tag`` element whose trimmed text equals ``label`` is located and
    its ancestor ``depth`` levels up is returned, in document order.
    """
    containers = []
    for element in root.find_all(tag):
        if element_text(element) != label:
            continue
        container = ancestor(element, depth)
        if container is not None:
            containers.append(container)
    return containers


def inner_html_with_breaks(element: Optional[Tag], separator: str) -> str:
    """
    Inner HTML of an element with line breaks replaced by ``separator`` and
    all whitespace removed, e.g. ``2026-01-16<br>10:57:48`` -> ``2026-01-16T10:57:48``.
    """
    if element is None:
        return ""
    raw = BR_TAG_PATTERN.sub(separator, element.decode_contents())
    return WHITESPACE_PATTERN.sub("", raw).strip()

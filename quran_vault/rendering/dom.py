"""Helpers for building HTML fragments as BeautifulSoup trees."""

from bs4 import BeautifulSoup, Tag

_FACTORY = BeautifulSoup("", "lxml")


def new_container(cls: str | None = None) -> Tag:
    """Create a detached ``<div>`` to render into."""
    soup = BeautifulSoup("<div></div>", "lxml")
    container = soup.div
    if cls:
        container["class"] = cls.split()
    return container


def create_el(
    parent: Tag,
    name: str,
    text: str | None = None,
    cls: str | None = None,
    **attrs: str,
) -> Tag:
    """Append a new ``name`` element to ``parent`` and return it.

    Args:
        parent: Element that receives the new child.
        name: Tag name, e.g. ``"div"``.
        text: Optional text content.
        cls: Space-separated CSS classes.
        **attrs: Extra attributes; ``data_x`` is written as ``data-x``.
    """
    tag = _FACTORY.new_tag(name)
    if cls:
        tag["class"] = cls.split()
    for key, value in attrs.items():
        tag[key.replace("_", "-")] = value
    if text is not None:
        tag.string = text
    parent.append(tag)
    return tag

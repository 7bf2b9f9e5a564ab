"""Render targets with latest-wins request tracking."""

from bs4 import Tag

from quran_vault.rendering.dom import create_el, new_container


class RenderTarget:
    """A container plus a counter of the requests rendered into it.

    Each load calls ``begin()`` and later checks ``is_current()`` before
    painting, so a slow response for an earlier request never overwrites
    the result of a newer one.

    Args:
        container: Element to render into; a fresh ``<div>`` if omitted.
    """

    def __init__(self, container: Tag | None = None) -> None:
        self.container = container if container is not None else new_container()
        self._latest = 0

    def begin(self) -> int:
        self._latest += 1
        return self._latest

    def is_current(self, token: int) -> bool:
        return token == self._latest

    def clear(self) -> None:
        self.container.clear()

    def show_loading(self, text: str = "Loading...") -> None:
        self.clear()
        create_el(self.container, "div", text=text, cls="quran-loading")

    def show_error(self, message: str, prefix: str = "Error") -> None:
        self.clear()
        create_el(self.container, "div", text=f"{prefix}: {message}", cls="quran-error")

    def html(self) -> str:
        return str(self.container)

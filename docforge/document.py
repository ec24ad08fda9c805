"""The document model: an ordered composite of elements."""

from typing import Iterator

from .elements import DocumentElement


class Document:
    """An ordered, append-only sequence of elements.

    Rendering is a pure function of the current sequence; the document keeps
    no cache of its own. Callers that cache renderings are responsible for
    noticing when elements are added.
    """

    def __init__(self):
        self._elements: list[DocumentElement] = []

    def add_element(self, element: DocumentElement) -> None:
        """Append an element to the end of the document."""
        self._elements.append(element)

    def render(self) -> str:
        """Concatenate the renderings of all elements in insertion order."""
        return "".join(element.render() for element in self._elements)

    @property
    def elements(self) -> tuple[DocumentElement, ...]:
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[DocumentElement]:
        return iter(self.elements)

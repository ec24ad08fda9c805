"""Renderable content elements.

A document is made of a closed family of elements. Each one knows how to
produce its own textual contribution and nothing else.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .constants import EditorConstants


class DocumentElement(ABC):
    """Base class for every element that can appear in a document."""

    __slots__ = ()

    @abstractmethod
    def render(self) -> str:
        """Return this element's contribution to the rendered document.

        Implementations must be total and free of side effects.
        """


@dataclass(frozen=True)
class Text(DocumentElement):
    """A run of text, rendered verbatim."""

    content: str

    def render(self) -> str:
        return self.content


@dataclass(frozen=True)
class Image(DocumentElement):
    """An image reference, rendered as a bracketed placeholder.

    The path is not checked for existence or well-formedness.
    """

    path: str

    def render(self) -> str:
        return EditorConstants.IMAGE_PLACEHOLDER.format(self.path)


@dataclass(frozen=True)
class LineBreak(DocumentElement):
    def render(self) -> str:
        return EditorConstants.LINE_BREAK


@dataclass(frozen=True)
class TabStop(DocumentElement):
    def render(self) -> str:
        return EditorConstants.TAB_STOP


ELEMENT_TYPES = (Text, Image, LineBreak, TabStop)

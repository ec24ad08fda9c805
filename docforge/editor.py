"""Document editor facade.

The editor is the only object a caller needs: it builds elements, keeps a
cached rendering of the document and hands finished renderings to storage.
"""

import logging
from typing import Optional

from .document import Document
from .elements import DocumentElement, Image, LineBreak, TabStop, Text
from .storage import Storage

logger = logging.getLogger(__name__)


class DocumentEditor:
    """Builds, renders and saves a single document."""

    def __init__(self, document: Document, storage: Storage):
        """Initialize the editor.

        Args:
            document: Document to edit. The editor takes ownership of it.
            storage: Backend that receives renderings. May be shared with
                other editors.
        """
        self._document = document
        self._storage = storage
        self._rendered: Optional[str] = None

    @property
    def document(self) -> Document:
        return self._document

    @property
    def storage(self) -> Storage:
        return self._storage

    def _add(self, element: DocumentElement) -> None:
        self._document.add_element(element)
        self._rendered = None

    def add_text(self, text: str) -> None:
        self._add(Text(text))

    def add_image(self, image_path: str) -> None:
        self._add(Image(image_path))

    def add_new_line(self) -> None:
        self._add(LineBreak())

    def add_tab_space(self) -> None:
        self._add(TabStop())

    def render_document(self) -> str:
        """Return the rendered document, computing it only when needed.

        An empty rendering is indistinguishable from a missing one, so a
        document that renders to "" is re-rendered on every call.
        """
        if self._rendered is None or self._rendered == "":
            logger.debug(f"Rendering document with {len(self._document)} elements")
            self._rendered = self._document.render()
        return self._rendered

    def save_document(self) -> None:
        """Render the document and pass the result to storage.

        Raises:
            StorageError: Whatever the storage backend raises, unchanged.
        """
        self._storage.save(self.render_document())

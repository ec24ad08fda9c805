"""docforge - A small document assembly engine."""

from .document import Document
from .editor import DocumentEditor
from .elements import DocumentElement, ELEMENT_TYPES, Image, LineBreak, TabStop, Text
from .storage import DatabaseStorage, FileStorage, Storage, StorageError, create_storage

__all__ = [
    'Document',
    'DocumentEditor',
    'DocumentElement',
    'ELEMENT_TYPES',
    'Image',
    'LineBreak',
    'TabStop',
    'Text',
    'Storage',
    'StorageError',
    'FileStorage',
    'DatabaseStorage',
    'create_storage',
]

"""Tests for the DocumentEditor facade."""

from unittest.mock import Mock

import pytest

from docforge.document import Document
from docforge.editor import DocumentEditor
from docforge.elements import Image, LineBreak, TabStop, Text
from docforge.storage import Storage, StorageError


class RecordingStorage(Storage):
    """Storage that remembers everything it was asked to save."""

    def __init__(self):
        self.saved = []

    def save(self, data):
        self.saved.append(data)


class FailingStorage(Storage):
    def __init__(self, error):
        self.error = error

    def save(self, data):
        raise self.error


def make_editor(storage=None):
    return DocumentEditor(Document(), storage or RecordingStorage())


def test_sample_document_renders_exactly():
    editor = make_editor()
    editor.add_text("Hello, world!")
    editor.add_new_line()
    editor.add_text("SOLID principles in action")
    editor.add_new_line()
    editor.add_tab_space()
    editor.add_text("Clean architecture")
    editor.add_new_line()
    editor.add_image("image.png")

    assert editor.render_document() == (
        "Hello, world!\nSOLID principles in action\n\tClean architecture\n[Image: image.png]"
    )


def test_new_editor_renders_empty_string():
    assert make_editor().render_document() == ""


def test_facade_builds_matching_elements():
    editor = make_editor()
    editor.add_text("t")
    editor.add_image("i.png")
    editor.add_new_line()
    editor.add_tab_space()

    assert editor.document.elements == (Text("t"), Image("i.png"), LineBreak(), TabStop())


def test_render_preserves_call_order():
    editor = make_editor()
    expected = []
    for i in range(5):
        editor.add_text(f"line {i}")
        editor.add_tab_space()
        editor.add_image(f"{i}.png")
        editor.add_new_line()
        expected.append(f"line {i}\t[Image: {i}.png]\n")

    assert editor.render_document() == "".join(expected)


def test_consecutive_renders_are_equal():
    editor = make_editor()
    editor.add_text("stable")
    assert editor.render_document() == editor.render_document()


def test_render_reflects_additions_after_earlier_render():
    editor = make_editor()
    editor.add_text("first")
    assert editor.render_document() == "first"

    editor.add_new_line()
    editor.add_text("second")
    assert editor.render_document() == "first\nsecond"


def test_save_passes_rendering_to_storage():
    storage = RecordingStorage()
    editor = make_editor(storage)
    editor.add_text("saved text")
    editor.add_new_line()

    editor.save_document()

    assert storage.saved == ["saved text\n"]


def test_save_empty_document():
    storage = RecordingStorage()
    make_editor(storage).save_document()
    assert storage.saved == [""]


def test_swapping_storage_does_not_change_rendering():
    first, second = RecordingStorage(), Mock(spec=Storage)
    editors = [make_editor(first), make_editor(second)]
    for editor in editors:
        editor.add_text("same")
        editor.add_image("pic.jpg")

    renderings = [editor.render_document() for editor in editors]
    assert renderings[0] == renderings[1]

    for editor in editors:
        editor.save_document()
    assert first.saved == [renderings[0]]
    second.save.assert_called_once_with(renderings[1])


def test_storage_shared_between_editors():
    storage = RecordingStorage()
    one, two = make_editor(storage), make_editor(storage)
    one.add_text("one")
    two.add_text("two")

    one.save_document()
    two.save_document()

    assert storage.saved == ["one", "two"]
    assert one.storage is two.storage


def test_storage_error_propagates_unchanged():
    error = StorageError("disk on fire")
    editor = make_editor(FailingStorage(error))
    editor.add_text("content")

    with pytest.raises(StorageError) as excinfo:
        editor.save_document()

    assert excinfo.value is error


def test_other_storage_exceptions_are_not_wrapped():
    editor = make_editor(FailingStorage(RuntimeError("unexpected")))
    with pytest.raises(RuntimeError, match="unexpected"):
        editor.save_document()


def test_failed_save_keeps_cached_rendering():
    document = Document()
    editor = DocumentEditor(document, FailingStorage(StorageError("nope")))
    editor.add_text("cached")

    with pytest.raises(StorageError):
        editor.save_document()

    document.add_element(Text(" behind the editor's back"))
    assert editor.render_document() == "cached"

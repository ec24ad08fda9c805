"""docforge CLI entry point.

Allows running via `python -m docforge` and provides the console script
defined in `pyproject.toml`. Assembles the sample document and saves it
through the configured storage backend.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .constants import EditorConstants
from .version import get_version_string

logger = logging.getLogger("docforge")


def build_sample(editor) -> None:
    """Fill an editor with the sample document."""
    editor.add_text("Hello, world!")
    editor.add_new_line()
    editor.add_text("SOLID principles in action")
    editor.add_new_line()
    editor.add_tab_space()
    editor.add_text("Clean architecture")
    editor.add_new_line()
    editor.add_image("image.png")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docforge",
        description="Assemble the sample document and save it.",
    )
    parser.add_argument("--version", "-V", action="store_true",
                        help="print version and exit")
    parser.add_argument("--backend", choices=EditorConstants.BACKENDS,
                        help="storage backend (defaults to the saved setting)")
    parser.add_argument("--output", "-o", metavar="PATH",
                        help="file or database the backend writes to")
    parser.add_argument("--print", dest="print_rendering", action="store_true",
                        help="also write the rendering to stdout")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log storage activity")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.version:
        print(get_version_string())
        return 0

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Lazy import so --version does not pull in storage dependencies
    from .document import Document
    from .editor import DocumentEditor
    from .settings import get_persistence
    from .storage import StorageError, create_storage

    settings = get_persistence().load_settings()
    backend = args.backend or settings["backend"]
    # A saved target belongs to the saved backend only
    target = args.output
    if target is None and backend == settings["backend"]:
        target = settings["target"]

    try:
        storage = create_storage(backend, target)
        editor = DocumentEditor(Document(), storage)
        build_sample(editor)
        if args.print_rendering:
            print(editor.render_document())
        editor.save_document()
    except StorageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Saved via {storage!r}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

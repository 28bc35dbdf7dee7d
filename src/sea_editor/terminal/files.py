"""Loading documents from disk and writing them back."""

from __future__ import annotations

from sea_editor.buffer import Document
from sea_editor.errors import FatalEnvironmentError
from sea_editor.runtime import telemetry
from sea_editor.syntax import profile_for_filename


def load_document(path: str) -> Document:
    """Read ``path`` into a clean document.

    A missing file is the start of a new one: the document is empty, named,
    and flagged ``new_file``. Any other read failure is fatal.
    """

    profile = profile_for_filename(path)
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except FileNotFoundError:
        telemetry.record_event("file.new", data={"file": path, "profile": profile.name})
        document = Document(file_name=path, profile=profile)
        document.new_file = True
        return document
    except OSError as exc:
        telemetry.record_event("file.open_failed", level="error", data={"file": path, "error": exc})
        raise FatalEnvironmentError("Couldn't open file", cause=exc) from exc

    document = Document.from_bytes(data, file_name=path, profile=profile)
    telemetry.record_event(
        "file.loaded",
        data={"file": path, "rows": document.used_rows, "profile": profile.name},
    )
    return document


def write_document(document: Document) -> int:
    """Truncate and rewrite ``document.file_name``; returns the bytes written."""

    if not document.file_name:
        raise ValueError("document has no file name")
    payload = document.serialize()
    with open(document.file_name, "wb") as handle:
        handle.write(payload)
    return len(payload)


__all__ = ["load_document", "write_document"]

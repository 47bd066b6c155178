"""
JSON document file I/O.

Files are created lazily and always rewritten in full.
"""

import json
from pathlib import Path

from loguru import logger

from ..core.exceptions import DocumentParseError
from ..core.models import Document


def create_file_if_not_exists(path: Path) -> Path:
    """
    Create the given file, and its parent directories, if it is missing.

    Losing a creation race to another caller is not an error.

    Raises:
        OSError: If the file could not be created
    """
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            with open(path, "x", encoding="utf-8"):
                pass
            logger.debug(f"Created data file '{path}'")
        except FileExistsError:
            pass
    return path


def parse_document(text: str, path: Path) -> Document:
    """
    Parse file contents as a JSON object.

    Raises:
        DocumentParseError: If the text is not a JSON object
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise DocumentParseError(
            str(path), f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def read_text(path: Path) -> str:
    """
    Read a data file as UTF-8 text.

    Raises:
        OSError: If the file cannot be read
        DocumentParseError: If the bytes are not valid UTF-8
    """
    raw = path.read_bytes()
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DocumentParseError(str(path), f"not valid UTF-8: {e}") from e


def read_document(path: Path) -> Document:
    """
    Read and parse a JSON object from disk.

    Raises:
        OSError: If the file cannot be read
        DocumentParseError: If the contents are not a UTF-8 JSON object
    """
    return parse_document(read_text(path), path)


def write_document(path: Path, document: Document, pretty_print: bool = False) -> None:
    """
    Overwrite a file with the JSON encoding of a document.

    Raises:
        OSError: If the file cannot be written
        TypeError: If the document holds values JSON cannot encode
    """
    indent = 2 if pretty_print else None
    text = json.dumps(document, ensure_ascii=False, indent=indent)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

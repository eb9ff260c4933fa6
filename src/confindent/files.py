"""Read and write confindent documents on disk."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from confindent import config
from confindent.exceptions import FileReadError
from confindent.parser import parse_text
from confindent.schemas import Confindent
from confindent.serializer import serialize

logger = logging.getLogger(__name__)


def load(path: str | Path, encoding: str | None = None) -> Confindent:
    """Read and parse the file at ``path``.

    Args:
        path: Path to the configuration file.
        encoding: Text encoding of the file. Defaults to CONFINDENT_ENCODING.

    Returns:
        The parsed document.

    Raises:
        FileReadError: If the file cannot be read or decoded.
        ParseError: If the contents are not a valid document.
    """
    path = Path(path)
    logger.debug("Loading configuration from %s", path)
    try:
        text = path.read_text(encoding=encoding or config.CONFINDENT_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"Failed to read configuration file {path}: {exc}") from exc
    return parse_text(text)


def save(document: Confindent, path: str | Path, encoding: str | None = None) -> None:
    """Serialize ``document`` and write it to ``path``, replacing its contents.

    Args:
        document: The document to write.
        path: Destination file path.
        encoding: Text encoding to use. Defaults to CONFINDENT_ENCODING.
    """
    path = Path(path)
    logger.debug("Saving configuration to %s", path)
    path.write_text(serialize(document), encoding=encoding or config.CONFINDENT_ENCODING)


async def load_async(path: str | Path, encoding: str | None = None) -> Confindent:
    """Read and parse a file asynchronously using a thread pool.

    See load.
    """
    return await asyncio.to_thread(load, path, encoding)


async def save_async(
    document: Confindent, path: str | Path, encoding: str | None = None
) -> None:
    """Write a document asynchronously using a thread pool.

    See save.
    """
    await asyncio.to_thread(save, document, path, encoding)

"""
Dump file loading.

Reads a dump file as UTF-8 text and turns it into a Snapshot. All I/O of
the pipeline lives here so the parser and snapshot code stay pure.
"""

import logging
from pathlib import Path
from typing import Optional

from .errors import ConfigError, DumpReadError
from .snapshot import Snapshot

logger = logging.getLogger(__name__)


def read_dump(path: Optional[str]) -> str:
    """
    Read a dump file.

    Args:
        path: Path to the dump; None or "" means no file was specified

    Returns:
        File contents as text

    Raises:
        ConfigError: If no path was given
        DumpReadError: If the file is missing, unreadable or not UTF-8
    """
    if not path:
        raise ConfigError("no file specified")

    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DumpReadError(str(path), f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise DumpReadError(str(path), e.strerror or str(e)) from e

    logger.debug(f"Read {len(text)} characters from {file_path}")
    return text


def load_snapshot(path: Optional[str], over: int) -> Snapshot:
    """Read and parse a dump file into a Snapshot filtered by `over`."""
    text = read_dump(path)
    return Snapshot.from_text(text, over, source=str(path))

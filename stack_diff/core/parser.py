"""
Stack dump parser.

Splits raw dump text into records. Records are separated by a blank line
and look like:

    [goroutine profile: total 42]
    12 @ 0x43a1c5 0x4078bd 0x407659 0x6b4c1e
    #	0x6b4c1d	main.worker+0x3d	/src/main.go:31

The optional header line is discarded, the leading integer before " @ " is
the occurrence count and everything after the delimiter, embedded newlines
included, is the stack body.
"""

import logging
import re
from typing import List, Tuple

from .errors import ParseError

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = "\n\n"
_SEPARATOR_RE = re.compile(r"\r?\n\r?\n")
COUNT_DELIMITER = " @ "
HEADER_LABEL = "goroutine"

_COUNT_RE = re.compile(r"[+-]?[0-9]+")
_TOKEN_EXCERPT_LEN = 40


def _excerpt(token: str) -> str:
    if len(token) > _TOKEN_EXCERPT_LEN:
        return token[:_TOKEN_EXCERPT_LEN] + "..."
    return token


def split_records(text: str) -> List[str]:
    """
    Split dump text into raw record pieces (empty pieces included).

    A blank line ends a record whether lines end in LF or CRLF. Bodies are
    not rewritten, so a CR inside a record stays part of its body.
    """
    return _SEPARATOR_RE.split(text)


def parse_record(piece: str, record_index: int = 0) -> Tuple[int, str]:
    """
    Parse one record piece into (count, body).

    Args:
        piece: Raw record text, optionally starting with a header line
        record_index: 1-based position of the piece, used in error messages

    Returns:
        Tuple of occurrence count and stack body

    Raises:
        ParseError: If the header has no record after it, the delimiter is
            missing, or the count token is not a valid integer
    """
    index = record_index or None
    piece = piece.lstrip("\r\n")

    if piece.startswith(HEADER_LABEL):
        lines = piece.split("\n", 1)
        if len(lines) < 2 or not lines[1].strip():
            raise ParseError("header line is not followed by a record",
                             record_index=index, token=_excerpt(lines[0].rstrip("\r")))
        piece = lines[1]

    if COUNT_DELIMITER not in piece:
        first_line = piece.split("\n", 1)[0].rstrip("\r")
        raise ParseError(f"missing '{COUNT_DELIMITER.strip()}' delimiter",
                         record_index=index, token=_excerpt(first_line))

    token, body = piece.split(COUNT_DELIMITER, 1)
    if not _COUNT_RE.fullmatch(token):
        raise ParseError("count token is not a valid integer",
                         record_index=index, token=_excerpt(token))

    return int(token), body


def parse_pieces(pieces: List[str]) -> List[Tuple[int, str]]:
    """
    Parse split record pieces into (count, body) pairs in input order.

    Pieces that are blank after trimming are skipped; any other malformed
    piece aborts the parse with ParseError.
    """
    records: List[Tuple[int, str]] = []
    for position, piece in enumerate(pieces, start=1):
        if not piece.strip():
            continue
        records.append(parse_record(piece, record_index=position))

    logger.debug(f"Parsed {len(records)} records from {len(pieces)} pieces")
    return records


def parse_dump(text: str) -> List[Tuple[int, str]]:
    """Parse a whole stack dump into (count, body) pairs in input order."""
    return parse_pieces(split_records(text))

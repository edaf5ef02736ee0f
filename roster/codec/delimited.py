# ==============================================
# Delimited Codec
# ==============================================
#
# PURPOSE:
#   Parse comma-delimited text into rows of fields and
#   serialize rows back into text.
#
# FORMAT:
# -------
#   - One row per line, "\n" or "\r\n" line endings on read
#   - "\n" after every row on write, including the last
#   - Fields joined by "," with no quoting or escaping:
#     a field containing "," splits into two fields on read
#   - Blank (whitespace-only) lines are skipped on read
#
# FUNCTIONS:
# ----------
# - decode(text) -> list[list[str]]
# - encode(rows) -> str
#
# ==============================================

import re
from typing import List, Sequence

from ..errors import RaggedRowError

DELIMITER = ","
LINE_TERMINATOR = "\n"

_LINE_BREAK = re.compile(r"\r?\n")

Row = List[str]


def decode(text: str) -> List[Row]:
    """
    Split delimited text into rows of field strings.

    Each line is trimmed before it is split, so whitespace around a
    line is dropped while whitespace inside fields is kept.

    Args:
        text: Raw file contents

    Returns:
        Rows in file order, blank lines omitted
    """
    rows: List[Row] = []
    for line in _LINE_BREAK.split(text):
        line = line.strip()
        if line == "":
            continue
        rows.append(line.split(DELIMITER))
    return rows


def encode(rows: Sequence[Sequence[str]]) -> str:
    """
    Join rows into delimited text.

    The column count is taken from the first row. Every other row must
    have the same length.

    Args:
        rows: Rows of field strings

    Returns:
        Delimited text, "" for no rows

    Raises:
        RaggedRowError: if a row's length differs from the first row's
    """
    if not rows:
        return ""

    col_count = len(rows[0])
    lines = []
    for index, row in enumerate(rows, start=1):
        if len(row) != col_count:
            raise RaggedRowError(
                f"row {index} has {len(row)} fields, expected {col_count}"
            )
        lines.append(DELIMITER.join(str(field) for field in row))
        lines.append(LINE_TERMINATOR)
    return "".join(lines)

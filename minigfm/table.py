"""
Table sub-parser for the MiniGFM block transformer

Turns a GFM pipe table (header line, alignment line, body lines) into an
HTML ``<table>``. Every emitted row has exactly as many cells as the header.
"""

from enum import Enum
from typing import List, Optional

from .escaper import safe_html


class TableAlignment(Enum):
    """Column alignment taken from the separator line."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def split_header(header_line: str) -> List[str]:
    """Split header line into trimmed, non-empty column titles."""
    return [cell.strip() for cell in header_line.split("|") if cell.strip()]


def parse_table_alignment(align_line: str) -> List[Optional[TableAlignment]]:
    """
    Parse the separator line of a table.

    Args:
        align_line: Line like ``| :--- | :---: | ---: | --- |``

    Returns:
        One entry per non-empty segment, None where no alignment is set
    """
    aligns: List[Optional[TableAlignment]] = []
    for part in align_line.split("|"):
        part = part.strip()
        if not part:
            continue

        left = part.startswith(":")
        right = part.endswith(":")
        if left and right:
            aligns.append(TableAlignment.CENTER)
        elif left:
            aligns.append(TableAlignment.LEFT)
        elif right:
            aligns.append(TableAlignment.RIGHT)
        else:
            aligns.append(None)

    return aligns


def split_row(line: str, width: int) -> List[str]:
    """
    Split a body line into exactly ``width`` cells.

    Empty cells produced by the leading and trailing pipes are dropped,
    missing cells are filled with empty strings and extra cells are cut off.
    """
    cells = [cell.strip() for cell in line.split("|")]
    if cells and not cells[0]:
        cells = cells[1:]
    if cells and not cells[-1]:
        cells = cells[:-1]

    return [cells[i] if i < len(cells) else "" for i in range(width)]


def parse_table(header_line: str, align_line: str, body: str) -> str:
    """
    Render a table to HTML.

    Header and cell text are sanitised again with safe_html() no matter how
    the parser is configured.

    Args:
        header_line: First table line
        align_line: Separator line with optional ``:`` alignment markers
        body: Remaining table lines, may be empty

    Returns:
        ``<table>`` HTML on a single line
    """
    headers = split_header(header_line)
    aligns = parse_table_alignment(align_line)
    rows = [split_row(line, len(headers)) for line in body.strip().split("\n") if "|" in line]

    parts = ["<table>", "<thead><tr>"]
    for i, header in enumerate(headers):
        parts.append(f"<th{_align_attr(aligns, i)}>{safe_html(header)}</th>")
    parts.append("</tr></thead>")

    if rows:
        parts.append("<tbody>")
        for row in rows:
            parts.append("<tr>")
            for i, cell in enumerate(row):
                parts.append(f"<td{_align_attr(aligns, i)}>{safe_html(cell)}</td>")
            parts.append("</tr>")
        parts.append("</tbody>")

    parts.append("</table>")
    return "".join(parts)


def _align_attr(aligns: List[Optional[TableAlignment]], index: int) -> str:
    if index >= len(aligns) or aligns[index] is None:
        return ""
    return f' align="{aligns[index].value}"'

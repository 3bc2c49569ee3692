from typing import List, Literal, Optional, Sequence


def format_cents(cents: int) -> str:
    """Format an amount in cents as dollars, e.g. 1234 -> "$12.34"."""
    return f"${cents / 100:.2f}"


def generate_markdown_table(
    headers: Optional[Sequence[str]],
    rows: Sequence[Sequence[object]],
    aligns: Optional[List[Literal["l", "c", "r"]]] = None,
) -> str:
    """
    Generate a Markdown table.

    Args:
        headers: Column headers, or None to use first row as headers.
        rows: Rows of cells; cells are converted with str(). Rows shorter
              than the header are padded with empty cells.
        aligns: Alignment ('l', 'c', 'r') for each column.
                Defaults to all center ('c').

    Returns:
        str: Markdown formatted table, or "" when there is nothing to show.

    Raises:
        ValueError: if aligns or a row has more entries than there are columns.
    """
    if not rows and not headers:
        return ""

    if not headers:
        headers, rows = rows[0], rows[1:]

    headers = [str(h) for h in headers]
    num_cols = len(headers)

    if aligns is None:
        aligns = ["c"] * num_cols
    elif len(aligns) != num_cols:
        raise ValueError("Length of aligns must match number of headers.")

    str_rows: List[List[str]] = []
    for row in rows:
        if len(row) > num_cols:
            raise ValueError("Row has more cells than there are headers.")
        cells = [str(cell) for cell in row]
        str_rows.append(cells + [""] * (num_cols - len(cells)))

    align_map = {
        "l": ":---",
        "c": ":---:",
        "r": "---:",
    }

    header_line = "| " + " | ".join(headers) + " |"
    align_line = "| " + " | ".join(align_map[a] for a in aligns) + " |"
    row_lines = ["| " + " | ".join(row) + " |" for row in str_rows]

    return "\n".join([header_line, align_line, *row_lines])

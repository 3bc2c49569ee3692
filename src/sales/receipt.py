# markdown receipts; the transactions only supply the data

from typing import List, Optional, Sequence

from utils.pure import generate_markdown_table

RECEIPT_TITLE = "### Farm Shop Receipt"
PENDING_MESSAGE = "Transaction in progress. Check out to see the receipt."
THANK_YOU = "Thank you for shopping with us!"


def create_receipt(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    total: str,
    customer_name: str,
    savings: Optional[str] = None,
) -> str:
    """
    Render a finalised transaction as markdown.

    Cells past the last header are notes for that row (e.g. an applied
    discount) and are listed under the table instead of inside it.
    """
    width = len(headers)
    table_rows = [list(row[:width]) for row in rows]
    notes = [note for row in rows for note in row[width:] if note]

    aligns = ["l"] + ["r"] * (width - 1)
    lines: List[str] = [
        RECEIPT_TITLE,
        "",
        f"**Customer:** {customer_name}",
        "",
        generate_markdown_table(headers, table_rows, aligns),
        "",
    ]
    lines.extend(f"- {note}" for note in notes)
    if notes:
        lines.append("")
    lines.append(f"**Total:** {total}")
    if savings is not None:
        lines.append("")
        lines.append(f"**You saved:** {savings}")
    lines.extend(["", THANK_YOU])
    return "\n".join(lines)


def create_active_receipt() -> str:
    """Placeholder shown for a transaction that has not been finalised."""
    return f"{RECEIPT_TITLE}\n\n_{PENDING_MESSAGE}_"

"""
output_formatter.py - Plain-text tables for terminal output.

No colors or emojis. Uses plain text indicators: OK, ISSUE, (none).
"""


def table(headers, rows):
    """
    Format data as a text table.
    headers: ["Path", "Backup", "Status"]
    rows: [["/home/me/.muttrc", "(none)", "created"], ...]
    """
    if not rows:
        return "(empty)"
    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))
    header_line = "  ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
    separator = "  ".join("-" * w for w in widths)
    lines = [header_line, separator]
    for row in rows:
        lines.append("  ".join(str(cell).ljust(widths[i]) for i, cell in enumerate(row)))
    return "\n".join(lines)


def item_list(items, columns):
    """
    Format a list of dicts as a table, picking specific columns.
    items: [{"path": "...", "backup": None, "status": "created"}, ...]
    columns: [("path", "Path"), ("backup", "Backup")]
    """
    headers = [col[1] for col in columns]
    rows = []
    for item in items:
        row = []
        for key, _ in columns:
            val = item.get(key)
            if val is None:
                val = "(none)"
            elif isinstance(val, bool):
                val = "yes" if val else "no"
            row.append(str(val))
        rows.append(row)
    return table(headers, rows)


def write_results(results):
    """Table of WriteResult objects: Path, Backup, Status."""
    return item_list(
        [r.to_dict() for r in results],
        [("path", "Path"), ("backup", "Backup"), ("status", "Status")],
    )

from .types import SECTIONS


def extract_structure(attributes):
    """
    Summarize the grid shape of each section.

    ``columnCounts`` lists the distinct row widths of a section in row order.
    A section is rectangular when it has at most one width, and the table has
    consistent columns when all non-empty sections share the same width.
    Column deletion is scoped to one section, so ``hasConsistentColumns`` can
    be False for a table built only through the state transforms.
    """
    sections = []
    widths = set()
    is_rectangular = True

    for section in SECTIONS:
        rows = attributes.get(section) or []

        column_counts = []
        for row in rows:
            count = len(row.get("cells", []))
            if count not in column_counts:
                column_counts.append(count)

        if len(column_counts) > 1:
            is_rectangular = False
        widths.update(column_counts)

        sections.append(
            {
                "type": section,
                "rowCount": len(rows),
                "columnCounts": column_counts,
            }
        )

    return {
        "sections": sections,
        "isEmpty": all(s["rowCount"] == 0 for s in sections),
        "isRectangular": is_rectangular,
        "hasConsistentColumns": len(widths) <= 1,
    }

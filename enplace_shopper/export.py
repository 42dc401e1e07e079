"""Shopping list export in various formats."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from .checklist import Checklist
from .ingredient_parser import ParsedIngredient
from .shopping_list import ShoppingCategory, count_items


def _is_checked(item: ParsedIngredient, checklist: Checklist | None) -> bool:
    return checklist is not None and checklist.is_checked(item)


def format_shopping_list_text(
    groups: list[ShoppingCategory],
    recipe_count: int,
    checklist: Checklist | None = None,
) -> str:
    """
    Format a shopping list as shareable plain text.

    Each category heading is followed by one line per item, marked with
    "✓" when checked and "○" otherwise.
    """
    plural = "" if recipe_count == 1 else "s"
    lines = [f"🛒 Shopping List for {recipe_count} recipe{plural}", "Generated by EnPlace", ""]

    for group in groups:
        lines.append(group.label)
        for item in group.items:
            mark = "✓" if _is_checked(item, checklist) else "○"
            lines.append(f"  {mark} {item}")
        lines.append("")

    return "\n".join(lines)


def export_to_text(
    groups: list[ShoppingCategory],
    filepath: str | Path,
    *,
    recipe_count: int,
    checklist: Checklist | None = None,
) -> None:
    """Export shopping list to plain text."""
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(format_shopping_list_text(groups, recipe_count, checklist))


def export_to_json(
    groups: list[ShoppingCategory],
    filepath: str | Path,
    *,
    title: str | None = None,
    recipe_count: int,
    checklist: Checklist | None = None,
) -> None:
    """
    Export shopping list to JSON format.

    Args:
        groups: Category sections from aggregate()
        filepath: Output file path
        title: Optional list title
        recipe_count: Number of recipes the list was built from
        checklist: Optional checklist for checked state
    """
    checked_count = 0
    categories: list[dict[str, Any]] = []

    for group in groups:
        items = []
        for item in group.items:
            checked = _is_checked(item, checklist)
            checked_count += checked
            items.append({**item.to_dict(), "display": str(item), "checked": checked})
        categories.append({"category": group.category, "label": group.label, "items": items})

    data: dict[str, Any] = {
        "exported_at": datetime.now().isoformat(),
        "title": title,
        "recipe_count": recipe_count,
        "categories": categories,
        "summary": {
            "total_items": count_items(groups),
            "checked": checked_count,
            "categories": len(groups),
        },
    }

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def export_to_markdown(
    groups: list[ShoppingCategory],
    filepath: str | Path,
    *,
    title: str | None = None,
    recipe_count: int,
    checklist: Checklist | None = None,
) -> None:
    """Export shopping list to Markdown with task-list checkboxes."""
    lines: list[str] = []

    lines.append(f"# {title or 'Shopping List'}")
    lines.append("")
    lines.append(f"*Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}*")
    lines.append("")

    plural = "" if recipe_count == 1 else "s"
    lines.append(f"- **Recipes:** {recipe_count}")
    lines.append(f"- **Items:** {count_items(groups)}")
    lines.append("")
    if not groups:
        lines.append(f"*Nothing to buy for {recipe_count} recipe{plural}.*")
        lines.append("")

    for group in groups:
        lines.append(f"## {group.label}")
        lines.append("")
        for item in group.items:
            box = "x" if _is_checked(item, checklist) else " "
            line = f"- [{box}] {item}"
            if item.preparation:
                line += f" *({item.preparation})*"
            lines.append(line)
        lines.append("")

    with open(filepath, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))


def export_to_pdf(
    groups: list[ShoppingCategory],
    filepath: str | Path,
    *,
    title: str | None = None,
    recipe_count: int,
    checklist: Checklist | None = None,
) -> None:
    """
    Export shopping list to PDF format.

    Requires reportlab package.
    """
    try:
        from reportlab.lib import colors  # type: ignore[import-untyped]
        from reportlab.lib.pagesizes import A4  # type: ignore[import-untyped]
        from reportlab.lib.styles import (  # type: ignore[import-untyped]
            ParagraphStyle,
            getSampleStyleSheet,
        )
        from reportlab.lib.units import cm  # type: ignore[import-untyped]
        from reportlab.platypus import (  # type: ignore[import-untyped]
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )
    except ImportError as e:
        raise ImportError(
            "PDF export requires reportlab. Install with: pip install 'enplace-shopper[pdf]'"
        ) from e

    doc = SimpleDocTemplate(
        str(filepath),
        pagesize=A4,
        rightMargin=2 * cm,
        leftMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=2 * cm,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ListTitle",
        parent=styles["Heading1"],
        fontSize=18,
        spaceAfter=12,
    )
    subtitle_style = ParagraphStyle(
        "ListSubtitle",
        parent=styles["Normal"],
        fontSize=10,
        textColor=colors.grey,
        spaceAfter=20,
    )

    plural = "" if recipe_count == 1 else "s"
    elements: list[Any] = [
        Paragraph(title or "Shopping List", title_style),
        Paragraph(
            f"{recipe_count} recipe{plural} - {count_items(groups)} items - "
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            subtitle_style,
        ),
    ]

    for group in groups:
        # Built-in PDF fonts have no emoji glyphs
        heading = group.label.split(" ", 1)[-1]
        elements.append(Paragraph(heading, styles["Heading2"]))

        table_data = [["", "Amount", "Item", "Preparation"]]
        for item in group.items:
            table_data.append(
                [
                    "[x]" if _is_checked(item, checklist) else "[ ]",
                    item.amount,
                    item.name,
                    item.preparation or "",
                ]
            )

        table = Table(table_data, colWidths=[1.2 * cm, 3 * cm, 6.5 * cm, 5 * cm])
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.grey),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                    ("PADDING", (0, 0), (-1, -1), 4),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ]
            )
        )
        elements.append(table)
        elements.append(Spacer(1, 12))

    doc.build(elements)


def export_shopping_list(
    groups: list[ShoppingCategory],
    filepath: str | Path,
    *,
    title: str | None = None,
    recipe_count: int,
    checklist: Checklist | None = None,
    format: str | None = None,
) -> str:
    """
    Export shopping list to file.

    Format is auto-detected from file extension if not specified.

    Args:
        groups: Category sections from aggregate()
        filepath: Output file path
        title: Optional list title
        recipe_count: Number of recipes the list was built from
        checklist: Optional checklist for checked state
        format: Output format (txt, md, json, pdf) - auto-detected if None

    Returns:
        The format used for export
    """
    path = Path(filepath)

    # Auto-detect format from extension
    if format is None:
        format_map = {
            ".txt": "txt",
            ".json": "json",
            ".md": "md",
            ".markdown": "md",
            ".pdf": "pdf",
        }
        format = format_map.get(path.suffix.lower(), "md")

    if format in ("txt", "text"):
        export_to_text(groups, path, recipe_count=recipe_count, checklist=checklist)
    elif format == "json":
        export_to_json(
            groups, path, title=title, recipe_count=recipe_count, checklist=checklist
        )
    elif format in ("md", "markdown"):
        export_to_markdown(
            groups, path, title=title, recipe_count=recipe_count, checklist=checklist
        )
    elif format == "pdf":
        export_to_pdf(groups, path, title=title, recipe_count=recipe_count, checklist=checklist)
    else:
        raise ValueError(f"Unsupported format: {format}")

    return format

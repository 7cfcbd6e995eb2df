"""CLI entry point for boxtable. Uses Click for argument parsing."""

from __future__ import annotations

import csv
import json
import logging
from typing import Any, TextIO

import click

from boxtable.chars import STYLES
from boxtable.colors import strip_ansi
from boxtable.errors import InvalidColorFormat
from boxtable.table import TableOptions, TableStyle, create_table

logger = logging.getLogger(__name__)

_STYLE_CHOICES = ["default", *STYLES]


def _read_json(stream: TextIO) -> tuple[list[Any] | None, list[list[Any]]]:
    try:
        data = json.load(stream)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON input: {e}") from e

    head = None
    if isinstance(data, dict):
        head = data.get("head")
        data = data.get("rows", [])
    if not isinstance(data, list) or not all(isinstance(row, list) for row in data):
        raise click.ClickException("JSON input must be a list of rows (lists of cells)")
    if head is not None and not isinstance(head, list):
        raise click.ClickException("JSON 'head' must be a list")
    return head, data


def _read_csv(stream: TextIO) -> list[list[Any]]:
    try:
        return list(csv.reader(stream))
    except csv.Error as e:
        raise click.ClickException(f"Invalid CSV input: {e}") from e


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--format", "input_format",
    type=click.Choice(["json", "csv"]),
    default="json",
    show_default=True,
    help="Input format",
)
@click.option(
    "--style", "style_name",
    type=click.Choice(_STYLE_CHOICES),
    default="default",
    envvar="BOXTABLE_STYLE",
    show_default=True,
    help="Border glyph set",
)
@click.option("--head/--no-head", default=False, help="Use the first input row as the header")
@click.option(
    "--align", "aligns",
    type=click.Choice(["left", "center", "right"]),
    multiple=True,
    help="Column alignment, repeat once per column",
)
@click.option("--width", "widths", type=int, multiple=True, help="Column width, repeat once per column")
@click.option("--compact", is_flag=True, help="No padding between cells and borders")
@click.option("--padding", type=click.IntRange(min=0), default=None, help="Spaces on each side of a cell")
@click.option("--no-border", is_flag=True, help="Omit the top and bottom borders")
@click.option("--no-color", is_flag=True, help="Strip color escape sequences from the output")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    envvar="BOXTABLE_LOG_LEVEL",
    show_default=True,
)
def main(
    source,
    input_format,
    style_name,
    head,
    aligns,
    widths,
    compact,
    padding,
    no_border,
    no_color,
    log_level,
):
    """Render JSON or CSV rows from SOURCE (default: stdin) as a table."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if input_format == "csv":
        header, rows = None, _read_csv(source)
    else:
        header, rows = _read_json(source)

    if head and header is not None:
        raise click.UsageError("--head cannot be combined with a JSON 'head' field")
    if head and rows:
        header, rows = rows[0], rows[1:]
    logger.info("Rendering %d rows from %s", len(rows), getattr(source, "name", "<stream>"))

    options = TableOptions(
        chars=STYLES.get(style_name),
        style=TableStyle(border=False if no_border else None, compact=compact, padding=padding),
        head=header,
        col_widths=list(widths) or None,
        col_aligns=list(aligns) or None,
    )

    try:
        output = create_table(rows, options)
    except InvalidColorFormat as e:
        raise click.ClickException(str(e)) from e

    click.echo(strip_ansi(output) if no_color else output)


if __name__ == "__main__":
    main()

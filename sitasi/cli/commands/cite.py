"""Citation CLI commands."""

from pathlib import Path

import click

from sitasi.citations.clipboard import CopySink, Notification
from sitasi.citations.styles import (
    CitationStyle,
    format_citation,
    format_citations,
)
from sitasi.cli.formatters.citation import (
    OUTPUT_FORMATS,
    format_citations_json,
    format_citations_plain,
    format_citations_table,
)
from sitasi.cli.ui.messages import (
    error_message,
    notification_message,
    warning_message,
)
from sitasi.core.exceptions import RecordError
from sitasi.core.models import BibliographicRecord
from sitasi.storage.importers import load_records

STYLE_CHOICE = click.Choice(
    [style.value for style in CitationStyle], case_sensitive=False
)


def get_copy_sink(ctx, notify) -> CopySink:
    """Create a copy sink using configured notification messages."""
    messages = ctx.obj.config.get("messages") or {}
    return CopySink(notify=notify, messages=messages)


def _selected_styles(ctx, styles: tuple[str, ...]) -> list[CitationStyle]:
    names = list(styles) or list(ctx.obj.config.get("styles") or [])
    try:
        return [CitationStyle.from_name(name) for name in names]
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--style'") from e


def _record_from_options(options: dict) -> BibliographicRecord:
    if not options.get("title"):
        raise click.UsageError("Missing option '--title' (or use '--file').")
    return BibliographicRecord.from_dict(options)


# Command: cite
@click.command()
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read records from a JSON or YAML file",
)
@click.option("--title", "-t", help="Title of the work")
@click.option("--author", "-a", help="Author, as 'Last, First' or 'First Last'")
@click.option("--family-name", "author_family_name", help="Author's family name")
@click.option("--editor", help="Editor")
@click.option("--publisher", "-p", help="Publisher name")
@click.option("--year", "-y", "publish_year", type=int, help="Publication year")
@click.option("--edition", "-e", help="Edition, e.g. 'Edisi ke-2'")
@click.option("--pages", type=int, help="Number of pages")
@click.option("--doi", help="Digital Object Identifier")
@click.option("--isbn", help="ISBN")
@click.option(
    "--style",
    "-s",
    "styles",
    multiple=True,
    type=STYLE_CHOICE,
    help="Only show these styles (repeatable)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format",
)
@click.option(
    "--copy", "copy_style", type=STYLE_CHOICE, help="Copy a style to the clipboard"
)
@click.pass_context
def cite(
    ctx: click.Context,
    file_path: Path | None,
    styles: tuple[str, ...],
    output_format: str | None,
    copy_style: str | None,
    **record_options,
) -> None:
    """Format citations for a book.

    Prints the APA, MLA, Chicago and Harvard citations of the record given
    by options, or of every record in a JSON or YAML file.
    """
    console = ctx.obj.console

    if file_path:
        if any(value is not None for value in record_options.values()):
            raise click.UsageError("'--file' cannot be combined with record options.")
        records, errors = load_records(file_path)
        for error in errors:
            warning_message(ctx.obj.err_console, error)
    else:
        try:
            records = [_record_from_options(record_options)]
        except RecordError as e:
            error_message(ctx.obj.err_console, f"Invalid record: {e}")
            ctx.exit(1)

    if not records:
        error_message(ctx.obj.err_console, "No valid records found")
        ctx.exit(1)

    selected = _selected_styles(ctx, styles)
    output_format = output_format or ctx.obj.config.get("format") or "table"
    if output_format not in OUTPUT_FORMATS:
        raise click.BadParameter(
            f"'{output_format}' is not one of {', '.join(OUTPUT_FORMATS)}",
            param_hint="'--format'",
        )

    notifications: list[Notification] = []
    copied = None
    if copy_style:
        style = CitationStyle.from_name(copy_style)
        sink = get_copy_sink(ctx, notifications.append)
        sink.copy(style, format_citation(records[0], style))
        copied = sink.copied_style

    results = [(record, format_citations(record, selected)) for record in records]

    if output_format == "json":
        click.echo(format_citations_json(results))
    elif output_format == "plain":
        click.echo("\n\n".join(format_citations_plain(c) for _, c in results))
    else:
        for i, (record, citations) in enumerate(results):
            console.print(
                format_citations_table(
                    record, citations, copied=copied if i == 0 else None
                )
            )

    for notification in notifications:
        notification_message(ctx.obj.err_console, notification)


# Command: styles
@click.command()
@click.pass_context
def styles(ctx: click.Context) -> None:
    """List the supported citation styles."""
    console = ctx.obj.console
    for style in CitationStyle:
        console.print(f"[style.name]{style.value}[/style.name]")

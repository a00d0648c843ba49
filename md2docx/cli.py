"""
Converts Markdown to a Word document, to email-ready plain text, or to an
HTML preview.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from pathlib import Path

import click
from click.core import ParameterSource

from .config import ConfigError, FormattingOptions, build_config
from .constants import DEFAULT_OUTPUT_NAME, STDIN_PATH
from .convert import convert_markdown, email_text, save_document, write_text_output
from .exceptions import InvalidFileTypeError, Md2DocxError
from .filesystem import normalize_filepath, output_filename, read_markdown
from .preview import render_preview
from .utils.logger import configure_logging

__all__ = ["cli"]


def _unset_to_none(ctx: click.Context, param: click.Parameter, value: bool | None):
    if ctx.get_parameter_source(param.name) is ParameterSource.DEFAULT:
        return None
    return value


def formatting_options(command: Callable) -> Callable:
    """Attach the four formatting switches to a command.

    A switch left off the command line resolves to None so that it falls back
    to the config file.
    """
    switches = [
        ("strip_bold", "--strip-bold/--no-strip-bold", "Drop bold markers and styling."),
        ("strip_italic", "--strip-italic/--no-strip-italic", "Drop italic markers and styling."),
        ("strip_code", "--strip-code/--no-strip-code", "Drop inline code markers and styling."),
        (
            "render_tables_as_text",
            "--tables-as-text/--no-tables-as-text",
            "Collect pipe tables (aligned text in email output).",
        ),
    ]
    for name, flags, help_text in reversed(switches):
        command = click.option(
            flags, name, default=None, callback=_unset_to_none, help=help_text
        )(command)
    return command


def _load_source(source: str) -> tuple[str, Path | None]:
    """Read Markdown from a file path or from stdin when `source` is ``-``."""
    if source == STDIN_PATH:
        return click.get_text_stream("stdin").read(), None

    filepath = normalize_filepath(source)
    return read_markdown(filepath), filepath


def _resolve_options(filepath: Path | None, **overrides: bool | None) -> FormattingOptions:
    search_path = filepath.parent if filepath is not None else Path.cwd()
    return build_config(search_path, **overrides)


def handle_errors(command: Callable) -> Callable:
    """Report action failures as one-line click errors."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except (InvalidFileTypeError, ConfigError) as error:
            raise click.BadParameter(str(error)) from error
        except Md2DocxError as error:
            raise click.ClickException(str(error)) from error

    return wrapper


@click.group()
@click.version_option(package_name="md2docx")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool):
    """Convert Markdown to .docx, email-ready text, or an HTML preview."""
    configure_logging(verbose)


@cli.command()
@click.argument("source")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Destination .docx path.",
)
@formatting_options
@handle_errors
def convert(source: str, output: Path | None, **overrides: bool | None):
    """
    Convert SOURCE (a .md, .markdown or .txt file, or - for stdin) to .docx.

    Args:
        source: Path to the Markdown file, or ``-`` to read stdin.
        output: Destination path. Defaults to SOURCE with a ``.docx`` suffix, or
            ``converted-document.docx`` in the working directory for stdin.
        overrides: Formatting switches given on the command line.

    Raises:
        click.BadParameter: If the file type or configuration is invalid.
        click.ClickException: If reading, converting, or saving fails.

    Examples:
        md2docx convert notes.md --strip-code -o out.docx
    """
    markdown, filepath = _load_source(source)
    options = _resolve_options(filepath, **overrides)
    document = convert_markdown(markdown, options)

    if output is None:
        if filepath is None:
            output = Path.cwd() / DEFAULT_OUTPUT_NAME
        else:
            output = filepath.with_name(output_filename(filepath.name))

    save_document(document, output)
    click.echo(f"Document converted successfully: {output}")


@cli.command()
@click.argument("source")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the text to a file instead of stdout.",
)
@formatting_options
@handle_errors
def email(source: str, output: Path | None, **overrides: bool | None):
    """
    Print SOURCE as plain text ready to paste into an email.

    Examples:
        md2docx email notes.md --strip-bold --strip-italic --tables-as-text
    """
    markdown, filepath = _load_source(source)
    options = _resolve_options(filepath, **overrides)
    text = email_text(markdown, options)

    if output is None:
        click.echo(text)
    else:
        write_text_output(text, output)


@cli.command()
@click.argument("source")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the HTML to a file instead of stdout.",
)
@handle_errors
def preview(source: str, output: Path | None):
    """
    Render SOURCE to HTML with a CommonMark renderer.

    Examples:
        md2docx preview notes.md -o notes.html
    """
    markdown, _ = _load_source(source)
    html = render_preview(markdown)

    if output is None:
        click.echo(html, nl=False)
    else:
        write_text_output(html, output)


if __name__ == "__main__":
    cli()

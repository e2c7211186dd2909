import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from htmlrender import serialization
from htmlrender.elements import Page
from htmlrender.exceptions import HtmlRenderError
from htmlrender.renderer import render
from htmlrender.samples import sample_page
from htmlrender.sink import ConsoleSink, FileSink, Sink

try:
    __version__ = version("htmlrender")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

# Mapping from format names to file extensions.
EXTENSIONS = {"html": ".html", "json": ".json", "yaml": ".yaml"}


def _log_level(debug: bool, trace: bool) -> int:
    """Return the root log level selected by the global flags."""

    if trace:
        return 1
    if debug:
        return logging.DEBUG
    return logging.INFO


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="HTMLRENDER_LOG_FILE",
)
@click.version_option(__version__, prog_name="htmlrender")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Render HTML pages from JSON or YAML page definitions.

    Logging goes to standard error, or to ``--log-file`` when given
    (``HTMLRENDER_LOG_FILE`` may set it, also from a ``.env`` file).

    Args:
        debug: Log page loading and rendering details.
        trace: Log everything, including messages below debug level.
        log_file: Optional path to the log file.
    """
    level = _log_level(debug, trace)
    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    logging.debug(f"Logging at level {logging.getLevelName(level)}")
    load_dotenv()


def _format_page(page: Page, output_format: str) -> str:
    """Return ``page`` rendered as HTML or serialized as JSON/YAML."""

    if output_format == "html":
        return render(page)
    return serialization.dump_page(page, output_format)


def _choose_sink(
    output_path: Optional[str], stem: str, output_format: str, encoding: str
) -> Sink:
    """Return the sink for ``output_path``, or the console when unset.

    Args:
        output_path: File or directory chosen by the user, ``-`` or ``None``
            for the console.
        stem: File name used when ``output_path`` is a directory.
        output_format: Output format, used for the generated file extension.
        encoding: Text encoding of the output file.

    Returns:
        Destination for the formatted document.
    """

    if not output_path or output_path == "-":
        return ConsoleSink()

    final_path = Path(output_path)

    # If the provided path is a directory, build the file path inside it.
    if final_path.is_dir():
        final_path = final_path / f"{stem}{EXTENSIONS[output_format]}"

    return FileSink(final_path, encoding=encoding)


@cli.command("render")
@click.argument(
    "source",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(list(EXTENSIONS)),
    default="html",
    show_default=True,
    help="Output format.",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Encoding of the source and output files.",
)
def render_command(
    source: str,
    output_path: Optional[str] = None,
    output_format: str = "html",
    encoding: str = "utf-8",
) -> None:
    """Render a JSON or YAML page definition.

    Args:
        source: Path of the page definition file.
        output_path: Optional file or directory path for the output. If a
            directory is provided, the file name is generated from the
            source file name.
        output_format: Format of the output.
        encoding: Text encoding of the source and output files.
    """

    source_path = Path(source)
    try:
        page = serialization.load_page(source_path, encoding=encoding)
    except HtmlRenderError as exc:
        raise click.ClickException(f"{source_path}: {exc}") from exc

    sink = _choose_sink(output_path, source_path.stem, output_format, encoding)
    sink.write(_format_page(page, output_format))


@cli.command()
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default="out.html",
    show_default=True,
    help="Write output to FILE or DIRECTORY; use - for the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(list(EXTENSIONS)),
    default="html",
    show_default=True,
    help="Output format.",
)
def demo(output_path: str = "out.html", output_format: str = "html") -> None:
    """Render the bundled sample page.

    Args:
        output_path: File or directory path for the output.
        output_format: Format of the output.
    """

    sink = _choose_sink(output_path, "sample", output_format, "utf-8")
    sink.write(_format_page(sample_page(), output_format))

    if isinstance(sink, FileSink):
        logging.info(f"Sample page written to {sink.path}")

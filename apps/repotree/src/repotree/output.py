"""Report output."""

import logging
from pathlib import Path

import click

from .errors import OutputWriteFailedError

logger = logging.getLogger(__name__)


def write_output(text: str, output_file: Path | None = None) -> None:
    """
    Write the rendered listing to a file, or to stdout when no file is given.

    The text is encoded before the file is opened, so an unencodable listing
    leaves an existing file untouched. The file is created or truncated and
    written with a single call.
    """
    if output_file is None:
        click.echo(text, nl=False)
        return

    try:
        data = text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise OutputWriteFailedError(f"Cannot encode listing for {output_file}: {e}") from e

    try:
        with output_file.open("wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputWriteFailedError(f"Cannot write output file {output_file}: {e}") from e
    logger.info("Wrote %d bytes to %s", len(data), output_file)

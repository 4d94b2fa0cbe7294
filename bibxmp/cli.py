"""Command line interface for reading bibliographic entries out of PDFs."""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from pydantic import ValidationError
from pypdf.errors import PdfReadError

from bibxmp import __version__
from bibxmp.config import BibXmpConfig, XmpPreferences, load_config
from bibxmp.logging import enable_error_log, get_logger, set_log_level
from bibxmp.utils import expand_pdf_paths
from bibxmp.xmp.reader import read_xmp

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bibxmp")
def main():
    """bibxmp - extract bibliographic entries from PDF XMP metadata."""


@main.command()
@click.argument('paths', nargs=-1, type=str)
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file path')
@click.option('--format', '-f', 'output_format', type=click.Choice(['bibtex', 'json']), help='Output format')
@click.option('--password', type=str, help='Password used to decrypt the PDFs (overrides config)')
@click.option('--keyword-separator', type=str, help='Separator joining dc:subject keywords (overrides config)')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('--log-dir', type=click.Path(), help='Directory for error log files')
def read(
    paths: tuple[str, ...],
    config: Optional[str],
    output_format: Optional[str],
    password: Optional[str],
    keyword_separator: Optional[str],
    debug: bool,
    log_dir: Optional[str],
):
    """Read the bibliographic entries of PDF files (or directories of PDFs)."""
    settings = load_config(config) if config else BibXmpConfig()

    # command line options override the config file
    overrides = {}
    if password is not None:
        overrides["default_password"] = password
    if keyword_separator is not None:
        overrides["keyword_separator"] = keyword_separator
    if overrides:
        try:
            settings.xmp = XmpPreferences(**{**settings.xmp.dict(), **overrides})
        except ValidationError as e:
            raise click.UsageError(str(e))
    output_format = output_format or settings.output_format

    set_log_level("DEBUG" if debug else settings.log_level)
    if log_dir:
        enable_error_log(log_dir)

    if paths:
        files = expand_pdf_paths(paths)
    elif settings.inputs is not None:
        files = settings.inputs.get_files()
    else:
        click.echo("Error: no input given, pass PATHS or a config with inputs", err=True)
        sys.exit(2)

    results = []
    failed = False
    for file_path in files:
        try:
            entries = read_xmp(file_path, settings.xmp, debug=debug)
        except (OSError, PdfReadError) as e:
            logger.error(f"Could not read {file_path}: {e}")
            click.echo(f"Error: could not read {file_path}: {e}", err=True)
            failed = True
            continue
        results.append((file_path, entries))

    if output_format == "json":
        payload = [
            {"file": str(file_path), "entries": [entry.to_dict() for entry in entries]}
            for file_path, entries in results
        ]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for file_path, entries in results:
            for entry in entries:
                click.echo(f"% {Path(file_path).name}")
                click.echo(entry.to_bibtex())
                click.echo()

    if failed:
        sys.exit(1)


if __name__ == '__main__':
    main()

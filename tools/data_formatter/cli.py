"""CLI interface for Data Formatter."""

import sys
from pathlib import Path
from typing import Optional

import click

from shared.cli import handle_errors, info, success
from shared.logger import setup_logger

from .converter import DataConverter, InputFormat
from .highlight import StyledSink
from .model import ConversionFormat


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path), required=False)
@click.option(
    "--to",
    "-t",
    "to_format",
    type=click.Choice(["json", "yaml", "toml"], case_sensitive=False),
    default="json",
    show_default=True,
    help="Target format",
)
@click.option(
    "--from",
    "-f",
    "from_format",
    type=click.Choice(["json", "yaml", "toml", "csv"], case_sensitive=False),
    help="Source format (auto-detect from the file suffix, JSON for stdin)",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file (print to stdout if not specified)",
)
@click.option(
    "--query",
    "-q",
    help="JMESPath query to extract data",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Highlight output (default: only when stdout is a terminal)",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    input_file: Optional[Path],
    to_format: str,
    from_format: Optional[str],
    output: Optional[Path],
    query: Optional[str],
    color: Optional[bool],
    verbose: bool,
):
    """
    Data Formatter - Print data as idiomatic JSON, YAML or TOML.

    Reads INPUT_FILE, or stdin when no file is given and stdin is not a
    terminal.

    Examples:

        \b
        # Convert JSON to TOML
        data-format config.json --to toml

        \b
        # Convert YAML from stdin to JSON
        cat workflow.yaml | data-format --from yaml

        \b
        # Query and convert
        data-format users.json --to yaml --query 'users[0]'

        \b
        # Write to a file
        data-format Cargo.toml --to yaml --output cargo.yaml
    """
    log_level = "DEBUG" if verbose else "WARNING"
    setup_logger(__name__, level=log_level)

    converter = DataConverter()

    to_fmt = ConversionFormat(to_format.lower())
    from_fmt = InputFormat(from_format.lower()) if from_format else None

    stdin = click.get_text_stream("stdin")
    if not input_file and stdin.isatty():
        ctx = click.get_current_context()
        click.echo(ctx.get_help(), err=True)
        ctx.exit(2)

    try:
        if input_file:
            if verbose:
                info(f"Loading {input_file}")
            data = converter.load_file(input_file, format=from_fmt)
        else:
            data = converter.parse(stdin.read(), from_fmt or InputFormat.JSON)

        if query:
            if verbose:
                info(f"Applying query: {query}")
            data = converter.query(data, query)

        if output:
            output.write_text(converter.convert(data, to_fmt), encoding="utf-8")
            if verbose:
                success(f"Converted to {output}")
        else:
            converter.write(data, to_fmt, StyledSink(sys.stdout, enabled=color))

    except (FileNotFoundError, ValueError) as e:
        StyledSink(sys.stderr).write_error(str(e))
        sys.exit(1)

    except Exception as e:
        StyledSink(sys.stderr).write_error(f"Unexpected error: {e}")
        if verbose:
            raise
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Codesets command line interface."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from codesets import __version__
from codesets.comparison import CodeSetComparator
from codesets.config import ComparisonConfig
from codesets.storage import list_input_files, load_inputs, write_report
from codesets.types import CodeOrder, CodesetsError
from codesets.utils.logger import configure_logging, logger


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="codesets", message="%(prog)s v%(version)s")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Codesets - Multi-file Code Comparison.

    Finds which files contain each numeric code and groups codes by that
    exact set of files.
    """
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument(
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
)
@click.option("--extension", "-e", default=None, help="Input file extension (default: .txt).")
@click.option(
    "--output",
    "-o",
    default=None,
    help="Report file name, written inside DIRECTORY (default: comparison_report.txt).",
)
@click.option(
    "--code-order",
    type=click.Choice([o.value for o in CodeOrder]),
    default=None,
    help="Order of codes within a section.",
)
@click.option(
    "--max-range-span",
    type=int,
    default=None,
    help="Widest range expanded; wider ranges are reported as invalid.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON instead of a summary.")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the report instead of writing it.")
def compare(
    directory: Path,
    extension: str | None,
    output: str | None,
    code_order: str | None,
    max_range_span: int | None,
    as_json: bool,
    to_stdout: bool,
) -> None:
    """Compare the codes in every input file of DIRECTORY."""
    if as_json and to_stdout:
        raise click.UsageError("--json and --stdout cannot be combined")

    try:
        config = ComparisonConfig.from_env().with_overrides(
            extension=extension,
            report_name=output,
            code_order=code_order,
            max_range_span=max_range_span,
        )
        files = list_input_files(
            directory,
            config.extension,
            exclude=config.report_name,
            warning_threshold=config.file_warning_threshold,
        )
        comparator = CodeSetComparator(config)
        result = comparator.compare(load_inputs(files, config.encoding))

        if as_json:
            click.echo(json.dumps(result.to_dict(), indent=2))
            return

        report = comparator.render(result)
        if to_stdout:
            click.echo(report, nl=False)
            return

        target = write_report(directory / config.report_name, report, config.encoding)
    except CodesetsError as e:
        logger.debug(f"compare failed: {e}")
        click.echo(e.get_formatted_message(), err=True)
        sys.exit(1)

    click.echo(
        f"Compared {len(result.file_names)} files: {result.total_codes} codes in "
        f"{len(result.buckets)} signatures, {len(result.invalid_ranges)} invalid ranges"
    )
    click.echo(f"Report written to {target}")


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()

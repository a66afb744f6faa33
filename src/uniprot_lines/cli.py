"""Command-line interface for uniprot-lines."""

import sys
from pathlib import Path

import click

from .cli_utils import echo, progressbar, set_quiet_mode
from .config import Config, get_default_config_path, create_example_config
from .entry_reader import EntryReader, ON_ERROR_CHOICES
from .error_handler import ErrorHandler, LineSyntaxError
from .logging_config import LogTimer, log_performance, setup_logging
from .output_formatter import OutputFormatter


@click.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False), required=False)
@click.argument('output_file', type=click.Path(), required=False)
@click.option('--output-format', type=click.Choice(list(OutputFormatter.FORMATS)), help='Output file format')
@click.option('--on-error', type=click.Choice(list(ON_ERROR_CHOICES)), help='Skip or abort on malformed entries')
@click.option('--encoding', help='Input file encoding (auto-detected if not specified)')
@click.option('--excel-compatible', is_flag=True, help='Write a UTF-8 BOM for spreadsheet tools')
@click.option('--no-summary', is_flag=True, help='Do not write the summary sidecar file')
@click.option('--log-file', is_flag=True, help='Also write a log file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress all output except errors')
@click.option('--config', type=click.Path(exists=True), help='Configuration file path')
@click.option('--generate-config', is_flag=True, help='Generate example configuration file')
def main(input_file, output_file, output_format, on_error, encoding, excel_compatible,
         no_summary, log_file, verbose, quiet, config, generate_config):
    """Decode ID and AC lines of UniProtKB flat-file entries.

    Examples:
        uniprot-lines uniprot_sprot.dat headers.tsv
        uniprot-lines entries.txt --on-error abort
    """
    if quiet and verbose:
        click.echo("Error: Cannot use both --quiet and --verbose", err=True)
        sys.exit(1)

    set_quiet_mode(quiet)

    if generate_config:
        config_path = create_example_config()
        echo(f"Generated example configuration file: {config_path}")
        sys.exit(0)

    config_path = Path(config) if config else get_default_config_path()
    cfg = Config.from_file(config_path)
    cfg.merge_env_vars()
    cfg.merge_cli_args(
        output_format=output_format,
        on_error=on_error,
        encoding=encoding,
        excel_compatible=excel_compatible,
        no_summary=no_summary,
        log_file=log_file
    )

    if not input_file:
        ctx = click.get_current_context()
        echo(ctx.get_help())
        return

    setup_logging(
        log_level='DEBUG' if verbose else cfg.logging.level,
        log_dir=cfg.logging.log_dir,
        file_logging=cfg.logging.log_to_file,
        quiet=quiet
    )

    error_handler = ErrorHandler()
    try:
        reader = EntryReader(on_error=cfg.errors.on_error, error_handler=error_handler)
        with LogTimer(f"Reading {input_file}") as timer:
            headers = reader.read_file(input_file, encoding=cfg.input.encoding)
    except LineSyntaxError as e:
        echo(f"ERROR: Malformed entry in {input_file}: {e}", err=True)
        sys.exit(1)
    except (ValueError, OSError) as e:
        error_handler.handle_error(e, operation='read_file', source=str(input_file))
        echo(f"ERROR: Failed to read input file: {e}", err=True)
        sys.exit(1)

    format_info = reader.get_format_info()
    log_performance("Decoding entries", timer.elapsed, format_info['entries'])
    echo(f"Read {format_info['entries']} entries from {input_file} (encoding: {format_info['encoding']})")

    formatter = OutputFormatter(include_summary=cfg.output.include_summary)
    results = []
    with progressbar(headers, label='Formatting entries') as header_list:
        for header in header_list:
            results.append(formatter.format_header(header))
    for context in error_handler.error_history:
        results.append(formatter.format_header(error=context.message))

    if output_file:
        try:
            formatter.format_results(
                results,
                output_file,
                format=cfg.output.format,
                excel_compatible=cfg.output.excel_compatible
            )
            echo(f"Results written to: {output_file}")

            if error_handler.has_errors and cfg.errors.write_error_report:
                report_path = error_handler.export_error_report(
                    Path(output_file).with_suffix('.errors.json')
                )
                echo(f"Error report written to: {report_path}")
        except (ValueError, OSError) as e:
            echo(f"ERROR: Failed to write output file: {e}", err=True)
            sys.exit(1)
    else:
        for header in headers:
            echo(f"{header.id_line.name}\t{header.id_line.status.value}\t"
                 f"{header.id_line.length}\t{header.primary_accession}")

        stats = formatter.get_statistics()
        echo("=" * 60)
        echo(f"Processed {stats['total_processed']} entries")
        echo(f"Successful: {stats['successful']}")
        echo(f"Failed: {stats['failed']}")


if __name__ == '__main__':
    main()

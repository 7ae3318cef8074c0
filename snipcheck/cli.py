from __future__ import annotations

import sys
from ipaddress import IPv4Network
from pathlib import Path
from typing import List, Optional, Tuple

import typer

from snipcheck.datasources.config_file import ConfigFileSource
from snipcheck.errors import SnipCheckError
from snipcheck.models import Server
from snipcheck.processing.classify import classification_frame, find_unmatched, get_networks
from snipcheck.report.export import default_output_path, save_report_csv, write_unmatched
from snipcheck.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Report NetScaler servers that fall outside every declared SNIP subnet.")

log = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_config(input_path: Path) -> Tuple[List[Server], List[IPv4Network]]:
    """
    Internal helper: read the dump once, then parse SNIPs into networks
    and servers into records.
    """
    log.info("Input: %s", input_path)
    source = ConfigFileSource(input_path)

    snips = source.snips()
    networks = get_networks(snips)
    servers = source.servers()

    if not servers:
        log.warning("No 'add server' lines found in %s", input_path)
    if not networks:
        log.warning("No 'add ns ip' lines found in %s; every server is unmatched", input_path)

    return servers, networks


@app.command()
def check(
        input: Path = typer.Argument(
            ...,
            help="Path to the NetScaler configuration dump.",
        ),
        output: Optional[Path] = typer.Option(
            None,
            "--output",
            "-o",
            help="Output file (default: <input>-server-output.txt).",
        ),
        append: bool = typer.Option(
            False,
            "--append/--truncate",
            help="Append to the output file instead of replacing it.",
        ),
        report: Optional[Path] = typer.Option(
            None,
            "--report",
            help="Also write a CSV with every server and the network that contains it.",
        ),
        log_level: str = typer.Option(
            "WARNING",
            "--log-level",
            envvar="SNIPCHECK_LOG_LEVEL",
            help="Logging level: DEBUG | INFO | WARNING | ERROR | CRITICAL",
        ),
):
    """
    Write the IP of every server not covered by a SNIP network, one per line.

    Example:

        snipcheck ns.conf
        snipcheck ns.conf -o unmatched.txt --report servers.csv
    """
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"Unsupported log level: {log_level}", param_hint="--log-level")
    configure_logging(level)

    out_path = output if output is not None else default_output_path(input)

    try:
        servers, networks = _load_config(input)
        unmatched = find_unmatched(servers, networks)
        frame = classification_frame(servers, networks) if report is not None else None

        count = write_unmatched(unmatched, out_path, append=append)
        if frame is not None:
            save_report_csv(frame, report)
            typer.echo(f"Wrote report to {report}")
    except SnipCheckError as e:
        log.error("%s", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Wrote {count} unmatched server(s) to {out_path}")


def main() -> None:
    """Entry point for console_scripts."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Interrupted by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()

# snipcheck/report/export.py

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from snipcheck.errors import OutputFileError
from snipcheck.models import Server
from snipcheck.utils.logging import get_logger

log = get_logger(__name__)


PathLike = Union[str, Path]

OUTPUT_SUFFIX = "-server-output.txt"


def default_output_path(input_path: PathLike) -> Path:
    """<input-path>-server-output.txt, next to the input file."""
    return Path(f"{input_path}{OUTPUT_SUFFIX}")


def write_unmatched(servers: Iterable[Server], path: PathLike, append: bool = False) -> int:
    """
    Write one unmatched server IP per line.

    Parameters
    ----------
    servers : iterable of Server
        Servers to report, already filtered to the unmatched ones.
    path : str | Path
        Output file. Parent directories are created.
    append : bool, default False
        Append to an existing file instead of replacing it. Appending
        repeats entries when the same config is checked twice.

    Returns the number of lines written.
    """
    out_path = Path(path)
    mode = "a" if append else "w"
    log.info("Writing unmatched servers to %s (mode=%s)", out_path, mode)

    count = 0
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, mode, encoding="utf-8", newline="\n") as f:
            for server in servers:
                f.write(f"{server.ip_address}\n")
                count += 1
    except OSError as e:
        raise OutputFileError(out_path, e.strerror or str(e)) from e

    log.debug("Wrote %d line(s) to %s", count, out_path)
    return count


def save_report_csv(df: pd.DataFrame, path: PathLike) -> None:
    """Save the per-server classification table as CSV."""
    out_path = Path(path)
    log.info("Saving classification report to %s", out_path)
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out_path, index=False)
    except OSError as e:
        raise OutputFileError(out_path, e.strerror or str(e)) from e

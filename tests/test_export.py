import pandas as pd
import pytest

from snipcheck.errors import OutputFileError
from snipcheck.models import Server
from snipcheck.report.export import default_output_path, save_report_csv, write_unmatched


def test_default_output_path(tmp_path):
    assert default_output_path(tmp_path / "ns.conf") == tmp_path / "ns.conf-server-output.txt"
    assert str(default_output_path("ns.conf")) == "ns.conf-server-output.txt"


def test_write_unmatched(tmp_path):
    out = tmp_path / "out.txt"
    count = write_unmatched([Server("a", "10.0.0.1"), Server("b", "10.0.0.2")], out)
    assert count == 2
    assert out.read_text() == "10.0.0.1\n10.0.0.2\n"


def test_write_unmatched_truncates_by_default(tmp_path):
    out = tmp_path / "out.txt"
    out.write_text("stale\n")
    write_unmatched([Server("a", "10.0.0.1")], out)
    write_unmatched([Server("a", "10.0.0.1")], out)
    assert out.read_text() == "10.0.0.1\n"


def test_write_unmatched_append(tmp_path):
    out = tmp_path / "out.txt"
    write_unmatched([Server("a", "10.0.0.1")], out, append=True)
    write_unmatched([Server("a", "10.0.0.1")], out, append=True)
    assert out.read_text() == "10.0.0.1\n10.0.0.1\n"


def test_write_unmatched_empty_still_creates_file(tmp_path):
    out = tmp_path / "nested" / "out.txt"
    assert write_unmatched([], out) == 0
    assert out.read_text() == ""


def test_write_unmatched_unwritable(tmp_path):
    with pytest.raises(OutputFileError) as exc_info:
        write_unmatched([Server("a", "10.0.0.1")], tmp_path)
    assert exc_info.value.path == tmp_path


def test_save_report_csv(tmp_path):
    df = pd.DataFrame([
        {"name": "web1", "ip_address": "10.0.0.5", "line": 4, "network": "10.0.0.0/24", "matched": True},
    ])
    out = tmp_path / "report.csv"
    save_report_csv(df, out)
    assert out.read_text().splitlines() == [
        "name,ip_address,line,network,matched",
        "web1,10.0.0.5,4,10.0.0.0/24,True",
    ]

import json
import shutil

import pytest

from netsweep import main as cli
from netsweep.scanners.name_resolver import NslookupResolver
from netsweep.scanners.ping_probe import PingProbe


@pytest.fixture
def fake_network(monkeypatch):
    """Hosts .1 and .2 answer; only .1 has a name."""
    live = {"10.0.0.1": "gw.lan", "10.0.0.2": None}
    monkeypatch.setattr(PingProbe, "is_alive", lambda self, address: address in live)
    monkeypatch.setattr(NslookupResolver, "resolve", lambda self, address: live.get(address))


def test_sweep_prints_table_on_stdout(fake_network, capsys):
    assert cli.main(["--skip-checks", "10.0.0.0/29"]) == cli.EXIT_OK

    out = capsys.readouterr().out
    assert out == "10.0.0.1        gw.lan\n10.0.0.2\n"


def test_no_resolve(fake_network, capsys):
    assert cli.main(["--skip-checks", "--no-resolve", "10.0.0.1"]) == cli.EXIT_OK
    assert capsys.readouterr().out == "10.0.0.1\n"


def test_json_output(fake_network, tmp_path, capsys):
    target = tmp_path / "sweep.json"

    assert cli.main(["--skip-checks", "--json-output", str(target), "10.0.0.1-10.0.0.4"]) == 0

    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["scan_metadata"]["total_addresses"] == 4
    assert [h["ip_address"] for h in data["hosts"]] == ["10.0.0.1", "10.0.0.2"]


@pytest.mark.parametrize("spec", ["1.2.3", "1.2.3.4/5/6", "1.2.3.4/40", ""])
def test_malformed_spec_exits_with_failure(fake_network, spec, capsys):
    assert cli.main(["--skip-checks", spec]) == cli.EXIT_FAILURE

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid address specification" in captured.err


def test_malformed_spec_reported_before_tool_checks(monkeypatch, capsys):
    monkeypatch.setattr(shutil, "which", lambda name: None)
    assert cli.main(["1.2.3"]) == cli.EXIT_FAILURE
    assert "Required tool" not in capsys.readouterr().err


def test_missing_tools_fail_preflight(monkeypatch, capsys):
    monkeypatch.setattr(shutil, "which", lambda name: None)

    assert cli.main(["10.0.0.1"]) == cli.EXIT_FAILURE
    assert "Pre-flight checks failed" in capsys.readouterr().err


def test_write_config(tmp_path):
    assert cli.main(["--config-dir", str(tmp_path), "--write-config"]) == cli.EXIT_OK
    assert (tmp_path / "sweep_config.yml").is_file()


def test_missing_config_dir(tmp_path):
    assert cli.main(["--config-dir", str(tmp_path / "nope"), "10.0.0.1"]) == cli.EXIT_FAILURE


def test_workers_must_be_positive():
    with pytest.raises(SystemExit):
        cli.main(["--workers", "0", "10.0.0.1"])


def test_verbose_and_quiet_are_exclusive():
    with pytest.raises(SystemExit):
        cli.main(["-v", "-q"])

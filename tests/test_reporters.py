import io
import json
from datetime import datetime

from netsweep.core.address_codec import parse_address
from netsweep.core.data_models import ScanResult, SweepReport
from netsweep.utils.json_reporter import JSONReporter
from netsweep.utils.table_reporter import TableReporter


def result(ip, name=None):
    return ScanResult(address=parse_address(ip).address, alive=True, name=name)


def make_report():
    return SweepReport(
        timestamp=datetime(2024, 5, 1, 12, 30),
        specs=["192.168.1.0/30"],
        total_addresses=4,
        results=[result("192.168.1.1", "router.lan"), result("192.168.1.2")],
        duration=1.23456,
    )


class TestTableReporter:
    def test_named_host_is_padded(self):
        line = TableReporter.format_result(result("10.0.0.1", "a.lan"))
        assert line == "10.0.0.1        a.lan"
        assert line.index("a.lan") == 16

    def test_unnamed_host_is_bare(self):
        assert TableReporter.format_result(result("10.0.0.1")) == "10.0.0.1"

    def test_write(self):
        stream = io.StringIO()
        TableReporter(stream).write(make_report().results)
        assert stream.getvalue() == "192.168.1.1     router.lan\n192.168.1.2\n"

    def test_nothing_to_write(self):
        stream = io.StringIO()
        TableReporter(stream).write([])
        assert stream.getvalue() == ""


class TestJSONReporter:
    def test_to_json(self):
        data = JSONReporter().to_json(make_report())

        assert data["scan_metadata"] == {
            "timestamp": "2024-05-01T12:30:00",
            "scan_duration": 1.235,
            "specs": ["192.168.1.0/30"],
            "total_addresses": 4,
            "alive_hosts": 2,
        }
        assert data["hosts"] == [
            {"ip_address": "192.168.1.1", "hostname": "router.lan"},
            {"ip_address": "192.168.1.2", "hostname": None},
        ]

    def test_local_interface_sweep(self):
        report = make_report()
        report.specs = []
        assert JSONReporter().to_json(report)["scan_metadata"]["specs"] == ["<local interfaces>"]

    def test_write_report_creates_parents(self, tmp_path):
        target = tmp_path / "out" / "sweep.json"

        path = JSONReporter().write_report(make_report(), str(target))

        assert path == target
        assert json.loads(target.read_text(encoding="utf-8"))["scan_metadata"]["alive_hosts"] == 2

import pytest

from netsweep.core.probe_pipeline import ProbePipeline
from netsweep.core.scan_driver import ScanDriver
from netsweep.utils.error_handler import AddressFormatError

from .conftest import FakeInterfaceDetector, FakeProbe, FakeResolver


def make_driver(live=(), names=None, interfaces=()):
    probe = FakeProbe(live=live)
    pipeline = ProbePipeline(probe, FakeResolver(names or {}), max_workers=4)
    return ScanDriver(pipeline, FakeInterfaceDetector(interfaces)), probe


def test_sweeps_given_specs_in_order():
    driver, probe = make_driver(
        live={"10.0.0.3", "192.168.1.1"},
        names={"192.168.1.1": "router.lan"},
    )

    report = driver.run(["192.168.1.1", "10.0.0.0/30"])

    assert [(r.ip, r.name) for r in report.results] == [
        ("192.168.1.1", "router.lan"),
        ("10.0.0.3", None),
    ]
    assert report.total_addresses == 5
    assert report.alive_count == 2
    assert report.specs == ["192.168.1.1", "10.0.0.0/30"]
    assert len(probe.calls) == 5


def test_overlapping_specs_are_not_deduplicated():
    driver, probe = make_driver(live={"10.0.0.1"})

    report = driver.run(["10.0.0.1", "10.0.0.0/31"])

    assert [r.ip for r in report.results] == ["10.0.0.1", "10.0.0.1"]
    assert report.total_addresses == 3


def test_malformed_spec_aborts_before_probing():
    driver, probe = make_driver(live={"10.0.0.1"})

    with pytest.raises(AddressFormatError):
        driver.run(["10.0.0.1", "1.2.3"])

    assert probe.calls == []


def test_falls_back_to_local_interfaces():
    driver, probe = make_driver(
        live={"192.168.7.21"},
        interfaces=["192.168.7.20/30", "10.9.9.9/32"],
    )

    report = driver.run([])

    assert [r.ip for r in report.results] == ["192.168.7.21"]
    assert report.total_addresses == 5
    assert probe.calls.count("10.9.9.9") == 1


def test_interface_entry_without_mask_is_fatal():
    driver, _ = make_driver(interfaces=["192.168.7.20"])

    with pytest.raises(AddressFormatError, match="no mask"):
        driver.collect_targets([])


def test_no_interfaces_means_empty_report():
    driver, probe = make_driver()

    report = driver.run([])

    assert report.results == []
    assert report.total_addresses == 0
    assert probe.calls == []


def test_reversed_range_probes_nothing():
    driver, probe = make_driver()
    report = driver.run(["10.0.0.9-10.0.0.1"])
    assert report.total_addresses == 0
    assert probe.calls == []


def test_run_uses_precollected_targets():
    driver, probe = make_driver(live={"10.0.0.1"})
    targets = driver.collect_targets(["10.0.0.1"])

    report = driver.run(["10.0.0.1"], targets)

    assert [r.ip for r in report.results] == ["10.0.0.1"]
    assert report.duration >= 0

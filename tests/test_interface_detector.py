import socket
from collections import namedtuple

import psutil

from netsweep.core.interface_detector import InterfaceDetector

snicaddr = namedtuple("snicaddr", ["family", "address", "netmask", "broadcast", "ptp"])


def fake_interfaces(monkeypatch, interfaces):
    monkeypatch.setattr(psutil, "net_if_addrs", lambda: interfaces)


def test_lists_ipv4_networks(monkeypatch):
    fake_interfaces(monkeypatch, {
        "lo": [snicaddr(socket.AF_INET, "127.0.0.1", "255.0.0.0", None, None)],
        "eth0": [
            snicaddr(psutil.AF_LINK, "00:11:22:33:44:55", None, None, None),
            snicaddr(socket.AF_INET, "192.168.1.20", "255.255.255.0", "192.168.1.255", None),
            snicaddr(socket.AF_INET6, "fe80::1", "ffff:ffff:ffff:ffff::", None, None),
        ],
        "wlan0": [snicaddr(socket.AF_INET, "10.1.2.3", "255.255.0.0", None, None)],
    })

    assert InterfaceDetector().list_interfaces() == ["192.168.1.20/24", "10.1.2.3/16"]


def test_skips_entries_without_netmask(monkeypatch):
    fake_interfaces(monkeypatch, {
        "tun0": [snicaddr(socket.AF_INET, "10.8.0.2", None, None, "10.8.0.1")],
    })

    assert InterfaceDetector().list_interfaces() == []


def test_skips_bad_netmask(monkeypatch):
    fake_interfaces(monkeypatch, {
        "eth0": [snicaddr(socket.AF_INET, "10.0.0.2", "255.0.255.0", None, None)],
    })

    assert InterfaceDetector().list_interfaces() == []


def test_no_interfaces(monkeypatch):
    fake_interfaces(monkeypatch, {})
    assert InterfaceDetector().list_interfaces() == []

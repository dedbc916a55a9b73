import threading
import time

from netsweep.scanners.base_scanner import LivenessProbe, NameResolver


class FakeProbe(LivenessProbe):
    """Answers for a fixed set of addresses; optional per-address delays and failures."""

    tool_name = "fake-ping"

    def __init__(self, live=(), delays=None, failing=()):
        super().__init__()
        self.live = set(live)
        self.delays = delays or {}
        self.failing = set(failing)
        self.calls = []
        self._lock = threading.Lock()

    def is_alive(self, address):
        with self._lock:
            self.calls.append(address)
        if address in self.delays:
            time.sleep(self.delays[address])
        if address in self.failing:
            raise RuntimeError(f"probe blew up on {address}")
        return address in self.live


class FakeResolver(NameResolver):
    tool_name = "fake-nslookup"

    def __init__(self, names=None):
        super().__init__()
        self.names = names or {}
        self.calls = []
        self._lock = threading.Lock()

    def resolve(self, address):
        with self._lock:
            self.calls.append(address)
        return self.names.get(address)


class FakeInterfaceDetector:
    def __init__(self, entries):
        self.entries = list(entries)

    def list_interfaces(self):
        return list(self.entries)

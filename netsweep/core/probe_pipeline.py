"""
Concurrent probe-and-resolve pipeline.

Every address becomes an independent unit of work on a bounded thread pool:
ping it, and if it answers, look its name up. Units share no state; each
returns its own ScanResult. Results are collected by joining the futures in
the order they were submitted, so the reported order matches the address
order regardless of which probes finish first.
"""

from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Deque, Iterable, Iterator, List, Optional

from .address_codec import format_address
from .data_models import ScanResult
from ..scanners.base_scanner import LivenessProbe, NameResolver
from ..utils.logger import Logger, get_logger

DEFAULT_MAX_WORKERS = 64

# Futures kept in flight per worker; bounds memory on very large blocks.
WINDOW_FACTOR = 4

ProgressCallback = Callable[[int], None]


class ProbePipeline:
    """
    Probes addresses concurrently and collects the live ones.

    Attributes:
        probe: Liveness probe collaborator
        resolver: Name resolver collaborator, or None to skip resolution
        max_workers: Size of the worker pool
    """

    def __init__(
        self,
        probe: LivenessProbe,
        resolver: Optional[NameResolver] = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
        logger: Optional[Logger] = None,
    ):
        if max_workers <= 0:
            raise ValueError("max_workers must be positive")
        self.probe = probe
        self.resolver = resolver
        self.max_workers = max_workers
        self.logger = logger or get_logger(__name__)

    def identify(self, address: int) -> ScanResult:
        """
        Probe one address and, if it is live, resolve its name.

        Args:
            address: 32-bit address to probe

        Returns:
            ScanResult for the address
        """
        ip = format_address(address)
        if not self.probe.is_alive(ip):
            return ScanResult(address=address, alive=False)

        name = self.resolver.resolve(ip) if self.resolver else None
        return ScanResult(address=address, alive=True, name=name)

    def iter_results(
        self,
        addresses: Iterable[int],
        on_progress: Optional[ProgressCallback] = None,
    ) -> Iterator[ScanResult]:
        """
        Yield live results in submission order.

        At most ``max_workers * WINDOW_FACTOR`` units are pending at a time;
        the oldest pending unit is always joined first.
        If iteration stops early, units still queued are cancelled.

        Args:
            addresses: Addresses to probe, in the order to report them
            on_progress: Called with the number of finished units after each join
        """
        window = self.max_workers * WINDOW_FACTOR
        pending: Deque[Future] = deque()
        done = 0

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            try:
                for address in addresses:
                    pending.append(executor.submit(self.identify, address))
                    if len(pending) >= window:
                        result = self._join(pending.popleft())
                        done += 1
                        if on_progress:
                            on_progress(done)
                        if result is not None:
                            yield result

                while pending:
                    result = self._join(pending.popleft())
                    done += 1
                    if on_progress:
                        on_progress(done)
                    if result is not None:
                        yield result
            finally:
                # Interrupted or abandoned: only already running units finish.
                self._cancel(pending)

    def scan(
        self,
        addresses: Iterable[int],
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[ScanResult]:
        """
        Probe every address and return the live ones.

        Args:
            addresses: Addresses to probe
            on_progress: Optional progress callback

        Returns:
            Live results, in the order the addresses were given
        """
        return list(self.iter_results(addresses, on_progress))

    def _cancel(self, pending: Deque[Future]) -> None:
        cancelled = sum(1 for future in pending if future.cancel())
        if cancelled:
            self.logger.debug(f"Cancelled {cancelled} queued probe units")
        pending.clear()

    def _join(self, future: Future) -> Optional[ScanResult]:
        """Wait for one unit; a failed unit contributes nothing."""
        try:
            result = future.result()
        except Exception as e:
            self.logger.debug(f"Probe unit failed: {type(e).__name__}: {e}")
            return None
        return result if result.alive else None

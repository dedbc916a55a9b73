"""
Top-level sweep orchestration.

ScanDriver turns the command-line address specifications (or, without any,
the local interface networks) into address sequences, runs the probe
pipeline once over all of them and returns a SweepReport. Every
specification is parsed before the first probe is submitted, so a malformed
argument never leads to a partial sweep.
"""

import itertools
import time
from datetime import datetime
from typing import List, Optional, Sequence

from .address_codec import format_address, parse_address
from .data_models import SweepReport
from .interface_detector import InterfaceDetector
from .probe_pipeline import ProbePipeline
from .range_expander import expand, expand_spec
from ..utils.error_handler import AddressFormatError
from ..utils.logger import Logger, get_logger

# Sweeps above this size are allowed but announced.
LARGE_SWEEP_THRESHOLD = 65536

# Progress lines are logged every this many finished probes.
PROGRESS_STEP = 256


class ScanDriver:
    """
    Coordinates target collection, probing and reporting of one sweep.
    """

    def __init__(
        self,
        pipeline: ProbePipeline,
        interface_detector: Optional[InterfaceDetector] = None,
        logger: Optional[Logger] = None,
    ):
        """
        Initialize the driver.

        Args:
            pipeline: Probe pipeline used for the sweep
            interface_detector: Source of local networks when no specs are given
            logger: Logger instance
        """
        self.pipeline = pipeline
        self.interface_detector = interface_detector or InterfaceDetector()
        self.logger = logger or get_logger(__name__)

    def collect_targets(self, specs: Sequence[str]) -> List[Sequence[int]]:
        """
        Expand address specifications into address sequences.

        Without specs the local interface networks are used; each of those
        must carry a mask. Overlapping specs are not deduplicated.

        Args:
            specs: Command-line address specifications

        Returns:
            One address sequence per specification, in argument order

        Raises:
            AddressFormatError: If any specification is malformed
        """
        if specs:
            return [expand(spec) for spec in specs]

        targets = []
        for entry in self.interface_detector.list_interfaces():
            spec = parse_address(entry)
            if spec.mask is None:
                raise AddressFormatError("interface entry has no mask", entry)
            targets.append(expand_spec(spec))
        return targets

    def run(
        self,
        specs: Sequence[str],
        targets: Optional[List[Sequence[int]]] = None,
    ) -> SweepReport:
        """
        Execute a complete sweep.

        Args:
            specs: Command-line address specifications (may be empty)
            targets: Address sequences already collected for these specs

        Returns:
            SweepReport with the live hosts in submission order

        Raises:
            AddressFormatError: If any specification is malformed
        """
        report = SweepReport(timestamp=datetime.now(), specs=list(specs))
        if targets is None:
            targets = self.collect_targets(specs)
        total = sum(len(target) for target in targets)
        report.total_addresses = total

        for target in targets:
            if len(target):
                self.logger.debug(
                    f"Target block {format_address(target[0])} - {format_address(target[-1])}",
                    addresses=len(target),
                )

        if total == 0:
            self.logger.warning("No addresses to probe")
            return report

        if total > LARGE_SWEEP_THRESHOLD:
            self.logger.warning(f"Large sweep: {total} addresses queued")

        self.logger.progress_start(f"Probing with {self.pipeline.max_workers} workers", total)
        start = time.monotonic()

        def on_progress(done: int) -> None:
            if done % PROGRESS_STEP == 0 and done < total:
                self.logger.progress_update(done)

        report.results = self.pipeline.scan(itertools.chain.from_iterable(targets), on_progress)
        report.duration = time.monotonic() - start

        self.logger.progress_end(
            f"Sweep completed: {report.alive_count}/{total} hosts up in {report.duration:.1f} seconds"
        )
        return report

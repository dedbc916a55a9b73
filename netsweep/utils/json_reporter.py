"""
JSON Report Generator for netsweep.

Writes the outcome of a sweep as a JSON document next to the console table,
for consumption by other tools. Hosts keep submission order.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.data_models import SweepReport
from .logger import Logger, get_logger


class JSONReporter:
    """
    Handles generation of JSON reports from sweep results.

    This class is responsible for:
    - Converting a SweepReport to a JSON-serializable structure
    - Writing it to the requested path, creating parent directories
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or get_logger(__name__)

    def write_report(self, report: SweepReport, filepath: str) -> Path:
        """
        Write a sweep report to a JSON file.

        Args:
            report: Completed sweep report
            filepath: Destination path

        Returns:
            Path: Path to the written file

        Raises:
            OSError: If the file cannot be written
        """
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_json(report), f, indent=2, ensure_ascii=False)

        self.logger.info(f"JSON report successfully generated: {path}")
        return path

    def to_json(self, report: SweepReport) -> Dict[str, Any]:
        """
        Convert a SweepReport to a JSON-serializable dictionary.

        Args:
            report: Completed sweep report

        Returns:
            Dict with "scan_metadata" and "hosts" keys
        """
        scan_metadata = {
            "timestamp": report.timestamp.isoformat(),
            "scan_duration": round(report.duration, 3),
            "specs": report.specs or ["<local interfaces>"],
            "total_addresses": report.total_addresses,
            "alive_hosts": report.alive_count,
        }

        hosts = [
            {"ip_address": result.ip, "hostname": result.name}
            for result in report.results
        ]

        return {
            "scan_metadata": scan_metadata,
            "hosts": hosts,
        }

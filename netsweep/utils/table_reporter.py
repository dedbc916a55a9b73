"""
Console table of live hosts.
"""

import sys
from typing import Iterable, List, Optional, TextIO

from ..core.data_models import ScanResult

ADDRESS_WIDTH = 15


class TableReporter:
    """Renders one line per live host: the padded address, then the name."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    @staticmethod
    def format_result(result: ScanResult) -> str:
        if result.name:
            return f"{result.ip:<{ADDRESS_WIDTH}} {result.name}"
        return result.ip

    def render(self, results: Iterable[ScanResult]) -> List[str]:
        return [self.format_result(result) for result in results]

    def write(self, results: Iterable[ScanResult]) -> None:
        """Print the table to the configured stream (stdout by default)."""
        stream = self.stream or sys.stdout
        for line in self.render(results):
            print(line, file=stream)
        stream.flush()

"""
Reverse name resolution backed by the nslookup utility.
"""

from typing import List, Optional

from .base_scanner import NameResolver
from ..config.config_loader import ResolverConfig
from ..utils.logger import Logger

NAME_MARKER = "name = "
NAME_TERMINATOR = ".\n"


def extract_name(output: str) -> Optional[str]:
    """
    Extract the host name from nslookup output.

    The name is the text following the first ``name = `` marker, up to the
    next period that ends a line, e.g. ``7.1.168.192.in-addr.arpa
    name = printer.lan.`` gives ``printer.lan``.

    Args:
        output: Standard output of nslookup

    Returns:
        The host name, or None if either marker is missing or the name is empty
    """
    start = output.find(NAME_MARKER)
    if start < 0:
        return None

    rest = output[start + len(NAME_MARKER):]
    end = rest.find(NAME_TERMINATOR)
    if end < 0:
        return None

    return rest[:end] or None


class NslookupResolver(NameResolver):
    """
    Resolves host names with ``nslookup <address>``.

    A non-zero exit status, an invocation failure or output without a name
    all yield None.
    """

    tool_name = "nslookup"

    def __init__(self, config: Optional[ResolverConfig] = None, logger: Optional[Logger] = None):
        super().__init__(logger)
        self.config = config or ResolverConfig()

    def build_command(self, address: str) -> List[str]:
        return ["nslookup", address]

    def resolve(self, address: str) -> Optional[str]:
        result = self._run(self.build_command(address), timeout=self.config.timeout)
        if result is None or result.returncode != 0:
            return None

        name = extract_name(result.stdout or "")
        if name:
            self._log_debug(f"Resolved {address} to {name}")
        return name

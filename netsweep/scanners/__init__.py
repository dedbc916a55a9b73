"""
Probe collaborators for netsweep.

This package contains the collaborator interfaces used by the probe pipeline
and their implementations on top of the system ping and nslookup utilities.
"""

from .base_scanner import LivenessProbe, NameResolver
from .ping_probe import PingProbe
from .name_resolver import NslookupResolver, extract_name

__all__ = [
    'LivenessProbe',
    'NameResolver',
    'PingProbe',
    'NslookupResolver',
    'extract_name'
]

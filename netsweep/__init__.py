"""
netsweep

Local-network discovery: expands address specifications, pings every address
concurrently and reverse-resolves the hosts that answer.
"""

__version__ = "1.0.0"
__author__ = "NetSweep Team"

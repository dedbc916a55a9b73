"""
Core components: address parsing, expansion and the probe pipeline.
"""

from .data_models import AddressSpec, ScanResult, SweepReport
from .address_codec import parse_address, format_address
from .range_expander import expand, expand_spec, mask_word
from .probe_pipeline import ProbePipeline
from .interface_detector import InterfaceDetector
from .scan_driver import ScanDriver

__all__ = [
    'AddressSpec',
    'ScanResult',
    'SweepReport',
    'parse_address',
    'format_address',
    'expand',
    'expand_spec',
    'mask_word',
    'ProbePipeline',
    'InterfaceDetector',
    'ScanDriver'
]

"""
Configuration module for netsweep.
Provides configuration loading and validation for the probe, resolver and pipeline.
"""

from .config_loader import ConfigLoader, ProbeConfig, ResolverConfig, PipelineConfig

__all__ = ['ConfigLoader', 'ProbeConfig', 'ResolverConfig', 'PipelineConfig']

"""
Configuration loader for netsweep.
Handles loading and validation of the YAML configuration file with fallback to defaults.
"""

import yaml
from typing import Any, Dict, Optional
from dataclasses import dataclass, asdict
from pathlib import Path

from ..utils.error_handler import (
    ConfigurationError, ErrorContext, ErrorSeverity, ErrorType
)
from ..utils.logger import get_logger

DEFAULT_CONFIG_FILE = "sweep_config.yml"


@dataclass
class ProbeConfig:
    """Configuration for the ping liveness probe."""
    timeout: int = 1


@dataclass
class ResolverConfig:
    """Configuration for nslookup reverse resolution."""
    enabled: bool = True
    timeout: int = 5


@dataclass
class PipelineConfig:
    """Configuration for the concurrent probe pipeline."""
    max_workers: int = 64


class ConfigLoader:
    """
    Loads and validates the YAML configuration file for a sweep.
    Provides fallback to default configurations when the file or a section is missing.
    """

    def __init__(self, config_dir: Optional[str] = None, config_file: str = DEFAULT_CONFIG_FILE):
        """
        Initialize ConfigLoader.

        Args:
            config_dir: Directory containing the configuration file.
                       Defaults to the config directory relative to this file.
            config_file: Name of the configuration file

        Raises:
            ConfigurationError: If an explicit config_dir is not a directory
        """
        if config_dir is None:
            self.config_dir = Path(__file__).parent
        else:
            self.config_dir = Path(config_dir)
            if not self.config_dir.is_dir():
                raise ConfigurationError(
                    f"Configuration directory does not exist: {config_dir}",
                    ErrorContext(
                        error_type=ErrorType.CONFIGURATION_ERROR,
                        severity=ErrorSeverity.HIGH,
                        operation="load_config",
                        component="ConfigLoader",
                        additional_info={"config_dir": str(config_dir)},
                    ),
                )

        self.config_path = self.config_dir / config_file
        self.logger = get_logger(__name__)
        self._data: Optional[Dict[str, Any]] = None

    def _load_section(self, section: str) -> Optional[Dict[str, Any]]:
        """
        Return one top-level section of the configuration file.

        The file is read once; a missing file, a YAML error or a missing
        section all yield None so callers fall back to defaults.
        """
        if self._data is None:
            self._data = self._read_file()

        section_data = self._data.get(section)
        if section_data is None:
            self.logger.debug(f"No '{section}' section in {self.config_path}. Using defaults.")
            return None
        if not isinstance(section_data, dict):
            self.logger.warning(f"Invalid '{section}' section in {self.config_path}. Using defaults.")
            return None
        return section_data

    def _read_file(self) -> Dict[str, Any]:
        if not self.config_path.exists():
            self.logger.debug(f"Config file not found at {self.config_path}. Using default configuration.")
            return {}

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing config file {self.config_path}: {e}")
            self.logger.warning("Using default configuration.")
            return {}
        except OSError as e:
            self.logger.error(f"Cannot read config file {self.config_path}: {e}")
            self.logger.warning("Using default configuration.")
            return {}

        if not isinstance(config_data, dict):
            self.logger.warning(f"Invalid config structure in {self.config_path}. Using default configuration.")
            return {}

        self.logger.info(f"Loaded configuration from {self.config_path}")
        return config_data

    def load_probe_config(self) -> ProbeConfig:
        """
        Load the ping probe configuration.

        Returns:
            ProbeConfig object with loaded or default configuration
        """
        data = self._load_section('probe')
        if data is None:
            return ProbeConfig()

        return ProbeConfig(
            timeout=self._validate_positive_int(data.get('timeout', 1), 'probe.timeout', 1),
        )

    def load_resolver_config(self) -> ResolverConfig:
        """
        Load the reverse-resolution configuration.

        Returns:
            ResolverConfig object with loaded or default configuration
        """
        data = self._load_section('resolver')
        if data is None:
            return ResolverConfig()

        enabled = data.get('enabled', True)
        if not isinstance(enabled, bool):
            self.logger.warning(f"Invalid resolver.enabled: {enabled}. Must be true or false. Using default: True")
            enabled = True

        return ResolverConfig(
            enabled=enabled,
            timeout=self._validate_positive_int(data.get('timeout', 5), 'resolver.timeout', 5),
        )

    def load_pipeline_config(self) -> PipelineConfig:
        """
        Load the probe pipeline configuration.

        Returns:
            PipelineConfig object with loaded or default configuration
        """
        data = self._load_section('pipeline')
        if data is None:
            return PipelineConfig()

        return PipelineConfig(
            max_workers=self._validate_positive_int(data.get('max_workers', 64), 'pipeline.max_workers', 64),
        )

    def _validate_positive_int(self, value: Any, field_name: str, default: int) -> int:
        """
        Validate that a value is a positive integer.

        Args:
            value: Value to validate
            field_name: Name of the field for error messages
            default: Default value to use if validation fails

        Returns:
            Validated integer value or default
        """
        if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
            self.logger.warning(f"Invalid {field_name}: {value}. Must be an integer. Using default: {default}")
            return default
        try:
            int_value = int(value)
        except (ValueError, TypeError):
            self.logger.warning(f"Invalid {field_name}: {value}. Must be an integer. Using default: {default}")
            return default
        if int_value <= 0:
            self.logger.warning(f"Invalid {field_name}: {value}. Must be positive. Using default: {default}")
            return default
        return int_value

    def create_default_config(self) -> Path:
        """
        Write the default configuration file if it does not exist.

        Returns:
            Path of the configuration file
        """
        if self.config_path.exists():
            return self.config_path

        default_config = {
            'probe': asdict(ProbeConfig()),
            'resolver': asdict(ResolverConfig()),
            'pipeline': asdict(PipelineConfig()),
        }

        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(default_config, f, default_flow_style=False, indent=2)
        self.logger.info(f"Created default config at {self.config_path}")
        return self.config_path

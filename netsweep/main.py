"""
Main entry point for netsweep.

This module provides the command-line interface for the sweep tool,
including argument parsing, pre-flight checks, and graceful shutdown handling.
It is the only place that turns errors into process exit codes.
"""

import argparse
import signal
import sys
from typing import List, Optional

from . import __version__
from .config.config_loader import ConfigLoader
from .core.interface_detector import InterfaceDetector
from .core.probe_pipeline import ProbePipeline
from .core.scan_driver import ScanDriver
from .scanners.name_resolver import NslookupResolver
from .scanners.ping_probe import PingProbe
from .utils.error_handler import AddressFormatError, ConfigurationError, ToolValidator
from .utils.json_reporter import JSONReporter
from .utils.logger import LogLevel, get_logger, set_log_level
from .utils.table_reporter import TableReporter

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


class NetSweepApp:
    """
    Main application class for netsweep.

    Handles configuration, pre-flight checks, wiring of the collaborators and
    the application lifecycle.
    """

    def __init__(self):
        """Initialize the application."""
        self.logger = get_logger(__name__)
        self.shutdown_requested = False

        # Register signal handlers for graceful shutdown
        signal.signal(signal.SIGTERM, self._signal_handler)

    def _signal_handler(self, signum: int, frame) -> None:
        """
        Handle shutdown signals.

        Outstanding ping and nslookup processes die with the interpreter;
        partial output is not produced.
        """
        if not self.shutdown_requested:
            self.logger.warning("Received SIGTERM - stopping sweep")
            self.shutdown_requested = True
            sys.exit(EXIT_INTERRUPTED)
        else:
            self.logger.error("Force shutdown requested - terminating immediately")
            sys.exit(EXIT_FAILURE)

    def _perform_preflight_checks(self, resolve: bool) -> bool:
        """
        Check that the external utilities are installed.

        Args:
            resolve: Whether nslookup is needed

        Returns:
            bool: True if all checks pass, False otherwise
        """
        tools = [PingProbe.tool_name]
        if resolve:
            tools.append(NslookupResolver.tool_name)

        all_valid, missing = ToolValidator(self.logger).validate_tools(tools)
        if all_valid:
            self.logger.debug("All pre-flight checks passed")
        else:
            self.logger.error(f"Missing required tools: {', '.join(missing)}")
        return all_valid

    def build_driver(self, args: argparse.Namespace) -> ScanDriver:
        """
        Load the configuration and wire the sweep components.

        Command-line options override the configuration file.

        Args:
            args: Parsed command line arguments

        Returns:
            ScanDriver ready to run
        """
        config_loader = ConfigLoader(args.config_dir)
        probe_config = config_loader.load_probe_config()
        resolver_config = config_loader.load_resolver_config()
        pipeline_config = config_loader.load_pipeline_config()

        if args.timeout is not None:
            probe_config.timeout = args.timeout
        if args.workers is not None:
            pipeline_config.max_workers = args.workers
        if args.no_resolve:
            resolver_config.enabled = False

        probe = PingProbe(probe_config, logger=self.logger)
        resolver = NslookupResolver(resolver_config, logger=self.logger) if resolver_config.enabled else None

        pipeline = ProbePipeline(
            probe,
            resolver,
            max_workers=pipeline_config.max_workers,
            logger=self.logger,
        )
        return ScanDriver(pipeline, InterfaceDetector(self.logger), logger=self.logger)

    def run(self, args: argparse.Namespace) -> int:
        """
        Run the sweep.

        Args:
            args: Parsed command line arguments

        Returns:
            int: Exit code (0 for success, non-zero for failure)
        """
        try:
            if args.write_config:
                path = ConfigLoader(args.config_dir).create_default_config()
                self.logger.success(f"Configuration file: {path}")
                return EXIT_OK

            driver = self.build_driver(args)

            # Parse every spec before anything touches the network.
            targets = driver.collect_targets(args.specs)

            if args.skip_checks:
                self.logger.warning("Skipping pre-flight checks as requested")
            elif not self._perform_preflight_checks(driver.pipeline.resolver is not None):
                self.logger.error("Pre-flight checks failed. Use --skip-checks to bypass.")
                return EXIT_FAILURE

            report = driver.run(args.specs, targets)
            TableReporter().write(report.results)

            if args.json_output:
                JSONReporter(self.logger).write_report(report, args.json_output)

            return EXIT_OK

        except AddressFormatError as e:
            self.logger.error(f"Invalid address specification: {e}")
            return EXIT_FAILURE
        except ConfigurationError as e:
            self.logger.error(str(e))
            return EXIT_FAILURE
        except KeyboardInterrupt:
            self.logger.warning("Sweep interrupted by user")
            return EXIT_INTERRUPTED
        except OSError as e:
            self.logger.error(f"Sweep failed: {str(e)}", exception=e)
            return EXIT_FAILURE


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be positive")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command line argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="netsweep",
        description="Ping every address of the given networks and list the hosts that answer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Address specifications:
  192.168.1.7                 single address
  192.168.1.0/24              CIDR block
  192.168..                   partial address, prefix inferred from the first empty octet
  192.168.1.10-192.168.1.40   inclusive range

Examples:
  netsweep                        # Sweep the networks of the local interfaces
  netsweep 10.0.0.0/24            # Sweep one block
  netsweep --no-resolve 10.0..    # Sweep 10.0.0.0/16 without name lookups
  netsweep --json-output out.json 192.168.1.1-192.168.1.50
        """
    )

    parser.add_argument(
        "specs",
        nargs="*",
        metavar="SPEC",
        help="Address, block or range to sweep. Defaults to the local interface networks"
    )

    parser.add_argument(
        "--config-dir",
        type=str,
        help="Directory containing sweep_config.yml. Defaults to netsweep/config/"
    )

    parser.add_argument(
        "--workers", "-w",
        type=positive_int,
        help="Number of concurrent probes (overrides pipeline.max_workers)"
    )

    parser.add_argument(
        "--timeout", "-t",
        type=positive_int,
        help="Ping timeout in seconds (overrides probe.timeout)"
    )

    parser.add_argument(
        "--no-resolve", "-n",
        action="store_true",
        help="Do not reverse-resolve live hosts"
    )

    parser.add_argument(
        "--json-output",
        type=str,
        metavar="FILE",
        help="Also write the results as a JSON report"
    )

    parser.add_argument(
        "--skip-checks",
        action="store_true",
        help="Skip pre-flight checks for external tools (ping, nslookup)"
    )

    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Write the default sweep_config.yml into the config directory and exit"
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging output"
    )
    verbosity.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"netsweep {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for netsweep.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(LogLevel.DEBUG)
    elif args.quiet:
        set_log_level(LogLevel.ERROR)
    else:
        set_log_level(LogLevel.INFO)

    app = NetSweepApp()
    return app.run(args)


if __name__ == "__main__":
    sys.exit(main())

"""
Ship Simulator Application
==========================

Main entry point: builds the engine, seeds the starting fleet, starts the
tick scheduler and serves the HTTP API until shutdown.

Usage:
    python -m shipsim.main --host 0.0.0.0 --port 8080
    python -m shipsim.main --fleet random --count 20 --seed 1 --verbose
"""

import argparse
import logging
import signal
import sys
from typing import Optional, List

from .config import AppConfig, load_config
from .simulation.engine import SimulationEngine
from .simulation.fleet import FleetType, get_fleet
from .server.app import create_app

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # Per-request access lines drown out simulation logging
    logging.getLogger('werkzeug').setLevel(logging.WARNING)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Ship simulator backend")
    parser.add_argument("--config", "-c", default=None,
                        help="Path to JSON config file")
    parser.add_argument("--host", default=None,
                        help="HTTP bind address")
    parser.add_argument("--port", "-p", type=int, default=None,
                        help="HTTP port")
    parser.add_argument("--fleet", "-f", default=None,
                        choices=[t.value for t in FleetType],
                        help="Starting fleet")
    parser.add_argument("--count", "-n", type=int, default=None,
                        help="Number of vessels for the random fleet")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Random seed for the random fleet")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Verbose logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AppConfig:
    """Load the config file (if any) and apply command-line overrides."""
    config = load_config(args.config) if args.config else AppConfig()

    if args.host is not None:
        config.server.host = args.host
    if args.port is not None:
        config.server.port = args.port
    if args.fleet is not None:
        config.fleet = FleetType(args.fleet)
    if args.count is not None:
        config.fleet_count = args.count
    if args.seed is not None:
        config.fleet_seed = args.seed

    return config


def build_engine(config: AppConfig) -> SimulationEngine:
    """Create the engine and register the starting fleet."""
    engine = SimulationEngine(config.engine)
    for vessel in get_fleet(config.fleet, count=config.fleet_count,
                            seed=config.fleet_seed):
        engine.register(vessel)
    return engine


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    engine = build_engine(config)
    app = create_app(engine)

    def signal_handler(sig, frame):
        logger.info("Shutdown signal received")
        engine.stop()
        sys.exit(0)

    signal.signal(signal.SIGTERM, signal_handler)

    engine.start()
    try:
        logger.info(
            f"Serving {len(engine)} vessel(s) on "
            f"http://{config.server.host}:{config.server.port}"
        )
        app.run(host=config.server.host, port=config.server.port,
                threaded=True, use_reloader=False)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        engine.stop()


if __name__ == "__main__":
    main()

"""
Main entry point for PIXELDASH.

Loads settings from the environment (and .env) and runs the pygame
simulator.
"""

import asyncio
import logging
import sys


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_simulator() -> None:
    """Run the desktop simulator."""
    from pixeldash.config.settings import get_settings
    from pixeldash.simulator.window import SimulatorWindow

    window = SimulatorWindow(get_settings())
    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv
    from pixeldash.config.settings import get_settings

    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("PIXELDASH starting...")

    try:
        asyncio.run(run_simulator())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("PIXELDASH stopped")


if __name__ == "__main__":
    main()

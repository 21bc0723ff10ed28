"""Root pytest configuration for the console_output test suite."""

import logging
import os
import sys
from pathlib import Path

# Add src directory to path for imports
src_path = Path(__file__).parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


def configure_test_logging() -> None:
    """Send package logs through pytest's caplog at the configured level."""
    level = os.getenv("CONSOLE_OUTPUT_TEST_LOG_LEVEL", "WARNING")
    logger = logging.getLogger("console_output")
    logger.setLevel(level)
    logger.propagate = True


configure_test_logging()

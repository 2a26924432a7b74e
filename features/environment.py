"""
Behave environment configuration for Controller Options scenarios.
"""

import logging
import shutil
import tempfile
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_data_dir = Path(tempfile.mkdtemp(prefix="controller-options-"))
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.config_file = context.test_data_dir / "config.yaml"
    context.options = None
    context.validation_error = None
    context.enabled = None

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    if context.config_file.exists():
        context.config_file.unlink()

    logger.info(f"Completed scenario: {scenario.name}")


def after_all(context):
    """Clean up test environment after all tests."""
    shutil.rmtree(context.test_data_dir, ignore_errors=True)
    logger.info("Test environment cleanup complete")

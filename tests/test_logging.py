import logging
import os
import sys

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

import custom_pricing.api.main as api_main
from custom_pricing.config.settings import Settings
from custom_pricing.utils.logger import setup_logging


def test_create_app_configures_logging(monkeypatch):
    """Building the app (as uvicorn --factory does) sets up logging."""
    levels = []
    monkeypatch.setattr(api_main, "setup_logging", levels.append)

    api_main.create_app(Settings(variant_id="1", log_level="DEBUG"))

    assert levels == ["DEBUG"]


def test_setup_logging_installs_single_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("INFO")
    setup_logging("INFO")

    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)
    assert root.level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING


def test_service_info_records_reach_handler(monkeypatch):
    """INFO records from the package pass the root level once configured."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("INFO")

    assert logging.getLogger("custom_pricing.services.shopify_service").isEnabledFor(logging.INFO)

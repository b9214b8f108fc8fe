import json
import logging

import pytest

from mcp_json2swift.registry import ModelRegistry
from mcp_json2swift.schema import SchemaInferenceAnalyzer


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Configure logging for tests and the mcp_json2swift package.
    This fixture runs automatically before any tests.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear existing handlers to avoid duplicate logs
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root_logger.addHandler(console_handler)

    logging.getLogger("mcp_json2swift").setLevel(logging.DEBUG)
    root_logger.info("Logging has been configured for tests")


@pytest.fixture
def registry():
    """A fresh registry for one generation run."""
    return ModelRegistry()


@pytest.fixture
def analyzer(registry):
    """An analyzer writing nested records into the ``registry`` fixture."""
    return SchemaInferenceAnalyzer(registry=registry)


@pytest.fixture
def profile_document():
    return {
        "user_name": "Al",
        "age": 30,
        "tags": [],
        "address": {"city": "X"},
    }


@pytest.fixture
def json_file(tmp_path):
    """Write a document to a temporary JSON file and return its path."""

    def _write(document, name="input.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return path

    return _write

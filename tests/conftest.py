"""
Pytest configuration for gridsheet
"""

import json
import logging
import sys
from pathlib import Path

import pytest

from gridsheet.engine.blocks import BlockSpec, ContentKind, build_block


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid handlers leaking between tests."""
    # Clear all existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Set up console-only logging for tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests

    formatter = logging.Formatter(
        '%(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    # Cleanup after test
    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def make_block():
    """Factory building catalog blocks with sensible defaults."""

    def factory(key, kind=ContentKind.LITERAL, text="", header=None, left=0, right=0,
                keyid=None, table_width=80):
        if kind.is_keyid and keyid is None:
            keyid = "DEADBEEFCAFEBABE"
        if not text:
            text = keyid if kind.is_keyid else kind.value
        spec = BlockSpec(
            key=key,
            header=header if header is not None else key.upper(),
            kind=kind,
            text=text,
            margin_left=left,
            margin_right=right,
            keyid_hex16=keyid,
        )
        return build_block(spec, table_width)

    return factory


@pytest.fixture
def sample_document():
    """Decoded JSON sheet description used across tests."""
    return {
        "title": {"left": "Recovery sheet", "right": "Keep offline"},
        "table": {"width": 80},
        "data_headers": {
            "owner": "Owner",
            "keyid": "Key ID",
            "words": "Word grid",
            "pin": "PIN grid",
            "note": "Checksum",
        },
        "data": {
            "owner": "ALICE EXAMPLE",
            "keyid": "0xDEADBEEFCAFEBABE",
            "words": "grid36",
            "pin": "grid10",
            "note": "A1B2",
        },
        "margins": {
            "owner": {},
            "keyid": {"left": 1, "right": "1"},
            "words": {"right": 1},
            "pin": {"left": "1"},
            "note": {},
        },
    }


@pytest.fixture
def sample_sheet_path(temp_dir, sample_document):
    """Sample document written to ``<temp_dir>/sheet.json``."""
    path = temp_dir / "sheet.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


# Configure pytest to ignore logging errors
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    # Ignore logging errors during tests
    logging.raiseExceptions = False

"""Pytest configuration and shared fixtures for the orgmark test suite."""

import logging
import os

import pytest

from orgmark.ast import builder as b

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property tests will be skipped
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def footnoted_tree():
    """Provide a document that references two footnotes out of definition order.

    ``b`` is referenced first (twice), ``a`` second; the definitions live in a
    footnote section placeholder headline that lists ``a`` first.
    """
    return b.document(
        b.section(
            b.paragraph("First", b.footnote_reference("b"), "then", b.footnote_reference("a")),
            b.paragraph("Again", b.footnote_reference("b")),
        ),
        b.headline(
            1,
            "Footnotes",
            b.footnote_definition("a", b.paragraph("Alpha note ")),
            b.footnote_definition("b", b.paragraph(" Beta note")),
            footnote_section=True,
        ),
    )


@pytest.fixture
def clean_package_logger():
    """Remove handlers and level the CLI installs on the ``orgmark`` logger."""
    logger = logging.getLogger("orgmark")
    saved_level = logger.level
    saved_handlers = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in saved_handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved_level)

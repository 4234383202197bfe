"""Pytest configuration and shared fixtures for the mdtree test suite.

This module provides shared fixtures, test configuration, and Hypothesis
profiles used across the entire test suite.
"""

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from mdtree import MarkdownParser

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "performance: Size and time bounds on pathological input")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path)


@pytest.fixture
def parser() -> MarkdownParser:
    """Provide a fresh MarkdownParser."""
    return MarkdownParser()


@pytest.fixture
def sample_markdown() -> str:
    """Provide a document touching every block and inline construct.

    Returns
    -------
    str
        Standard sample Markdown used across multiple tests.

    """
    return """# Sample Document

This is a **sample document** with _italic text_ and some `inline code`.

## Section 2

Here is a list:

- Item 1
- Item 2
- Item 3

And a numbered list:

1. First item
2. Second item
3. Third item

> A quote with a [link](https://example.com "Example").
>
> > Nested quote

---

```python
def hello_world():
    print("Hello, World!")
```

![Logo](logo.png) &copy; 2025
"""


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Drop root handlers added during the test and restore the root level."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    try:
        yield
    finally:
        for handler in root_logger.handlers[:]:
            if handler not in saved_handlers:
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.setLevel(saved_level)

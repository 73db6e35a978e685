"""Pytest configuration and shared fixtures for the md2docx test suite."""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch, tmp_path):
    """Keep user and repository config files out of every test."""
    monkeypatch.delenv("MD2DOCX_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("USERPROFILE", str(tmp_path / "home"))


@pytest.fixture
def sample_markdown() -> str:
    """Markdown exercising every supported block kind."""
    return """---
title: Sample Document
author: Test Author
keywords: [markdown, docx]
---
# Sample Document

This is a **sample document** with _italic text_, ^^underlined text^^ and some `inline code`.
See [the docs](https://example.com/docs) for more.

## Lists

- Item 1
- Item 2
  - Nested item
- Item 3

3. Third
4. Fourth

### Code

```python
def hello_world():
    print("Hello, World!")
```

> Quoted text
> continues here.

---

| Header 1 | Header 2 |
|----------|----------|
| Row 1    | Data 1   |
| Row 2    | Data 2   |
"""


@pytest.fixture
def png_file(tmp_path) -> Path:
    """Write a 1x1 PNG and return its path."""
    from utils import MINIMAL_PNG_BYTES

    path = tmp_path / "pixel.png"
    path.write_bytes(MINIMAL_PNG_BYTES)
    return path

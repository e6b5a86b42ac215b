"""Pytest configuration and shared fixtures for the richtext2md test suite."""

import os

import pytest
from hypothesis import Verbosity, settings

from richtext2md.ast import DocumentBuilder, Root

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def text():
    """Shortcut for DocumentBuilder.text."""
    return DocumentBuilder.text


@pytest.fixture
def sample_document() -> Root:
    """A document exercising every standard attribute.

    Returns
    -------
    Root
        Header, paragraph with mixed inline formatting, a bullet list, a code
        block, a quote, an image and a horizontal rule.

    """
    text = DocumentBuilder.text
    embed = DocumentBuilder.embed
    return (
        DocumentBuilder()
        .add_line([text("Release notes")], {"header": 1})
        .add_line([text("Plain "), text("bold", bold=True), text(" and "), text("docs", link="https://x.io")])
        .add_line([text("first")], {"list": "bullet"})
        .add_line([text("second")], {"list": "bullet"})
        .add_line([text("x = 1")], {"code-block": True})
        .add_line([text("quoted")], {"blockquote": True})
        .add_line([embed("image", "https://x.io/a.png")])
        .add_line([embed("divider", True)])
        .get_document()
    )

"""Pytest configuration and shared fixtures for the orgleanpub test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from orgleanpub.ast import (
    CodeBlock,
    Document,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Link,
    LiteralBlock,
    MathInline,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture
def book_document() -> Document:
    """Provide a small book chapter touching every Leanpub rule.

    Returns
    -------
    Document
        Chapter with an anchored heading, code, an example block, links,
        math, a table and two footnotes.

    """
    return Document(
        children=[
            Heading(level=1, content=[Text(content="Intro")], identifier="sec1"),
            Paragraph(
                content=[
                    Text(content="See "),
                    Link(path="sec1", link_type="custom-id", content=[Text(content="the intro")]),
                    Text(content=" and "),
                    Link(path="//example.com", link_type="https"),
                    Text(content="."),
                    FootnoteReference(identifier="fn1"),
                ]
            ),
            CodeBlock(content="    print(1)\n", language="python"),
            LiteralBlock(content="$ make book\n"),
            Paragraph(
                content=[
                    Text(content="Energy is "),
                    MathInline(content="\\[E = mc^2\\]"),
                    FootnoteReference(definition=[Text(content="Anonymous note.")]),
                ]
            ),
            Table(rows=[TableRow(cells=[TableCell(content=[Text(content="cell")])])]),
            FootnoteDefinition(identifier="fn1", content=[Paragraph(content=[Text(content="A labelled note.")])]),
        ]
    )

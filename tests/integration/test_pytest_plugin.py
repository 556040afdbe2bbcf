"""Integration tests for the html-semantic-diff pytest plugin.

These tests verify that the assert_html_equivalent fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require html-semantic-diff to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import Any

import pytest

from html_semantic_diff import NormalizerConfig


def test_fixture_passes_equivalent_docs(assert_html_equivalent: Any) -> None:
    """Whitespace, class order and noise attributes do not matter."""
    assert_html_equivalent(
        '<div class="b a" data-rendered="123">\n  <p>Hello</p>\n</div>',
        '<div class="a b"><p>Hello</p></div>',
    )


def test_fixture_fails_structural_break(assert_html_equivalent: Any) -> None:
    with pytest.raises(AssertionError, match=r"Tag name mismatch"):
        assert_html_equivalent("<h2>Hi</h2>", "<h1>Hi</h1>")


def test_fixture_custom_config(assert_html_equivalent: Any) -> None:
    """Custom NormalizerConfig parameter should be forwarded to compare()."""
    assert_html_equivalent(
        "<div><nav>menu</nav><p>x</p></div>",
        "<div><p>x</p></div>",
        config=NormalizerConfig(drop_tags={"script", "style", "nav"}),
    )


def test_fixture_error_message_lists_every_difference(assert_html_equivalent: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_html_equivalent(
            '<p id="b">actual</p>',
            '<p id="a">expected</p>',
        )

    error_message = str(exc_info.value)
    assert "2 difference(s)" in error_message
    assert 'ID mismatch at p: "a" vs "b"' in error_message
    assert 'Text content mismatch at p: "expected" vs "actual"' in error_message


def test_fixture_returns_callable(assert_html_equivalent: Any) -> None:
    assert callable(assert_html_equivalent), (
        "assert_html_equivalent fixture must return a callable, not a direct value"
    )


def test_plugin_discovery() -> None:
    """Verify assert_html_equivalent appears in pytest --fixtures output."""
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "--fixtures", "-q"],
        capture_output=True,
        text=True,
        cwd=str(Path(__file__).resolve().parents[2]),
    )
    assert "assert_html_equivalent" in result.stdout, (
        f"assert_html_equivalent not found in pytest --fixtures output.\n"
        f"stdout:\n{result.stdout}\n"
        f"stderr:\n{result.stderr}"
    )

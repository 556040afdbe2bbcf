"""pytest plugin for html-semantic-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from html_semantic_diff import NormalizerConfig, compare


@pytest.fixture(scope="session")
def assert_html_equivalent() -> Any:
    """Fixture that returns a callable HTML equivalence asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh HTMLComparator per call).

    Usage in tests::

        def test_page(assert_html_equivalent):
            assert_html_equivalent(response.text, "<h1>Hello World</h1>")

        def test_broken_page(assert_html_equivalent):
            with pytest.raises(AssertionError, match=r"Tag name mismatch"):
                assert_html_equivalent("<h1>Hi</h1>", "<h2>Hi</h2>")

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when the documents differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: NormalizerConfig | None = None,
    ) -> None:
        """Assert that two HTML documents are semantically equivalent.

        Args:
            actual:   The markup (or canonical tree) produced by the code under test.
            expected: The expected/reference markup (or canonical tree).
            config:   Optional NormalizerConfig for custom noise rules.

        Raises:
            AssertionError: When any difference is found, listing every one
                of them in expected-vs-actual order.
        """
        result = compare(expected, actual, config=config)
        if not result.equal:
            listing = "\n".join(f"  - {diff}" for diff in result.differences)
            raise AssertionError(
                f"HTML documents not equivalent: "
                f"{len(result.differences)} difference(s) (expected vs actual)\n"
                f"{listing}"
            )

    return _assert

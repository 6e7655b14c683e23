"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def single_import_source() -> str:
    """A module with one default import and one default export."""
    return "import foo from 'foo';\nexport default foo;\n"


@pytest.fixture
def multi_import_source() -> str:
    """A module with several imports, a blank line inside the run and a body."""
    return (
        "import $ from 'jquery';\n"
        "\n"
        "import util from './util';\n"
        "\n"
        "var widget = util.wrap($);\n"
        "\n"
        "export default widget;\n"
    )


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Build a small source tree with modules, a plain script and an asset."""
    root = tmp_path / "src"
    (root / "lib").mkdir(parents=True)
    (root / "main.js").write_text("import lib from './lib/lib';\nexport default lib;\n", encoding="utf-8")
    (root / "lib" / "lib.js").write_text("var lib = {};\nexport default lib;\n", encoding="utf-8")
    (root / "lib" / "plain.js").write_text("console.log('no export');\n", encoding="utf-8")
    (root / "style.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    return root

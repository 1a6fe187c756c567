"""
QML Script IntelliSense Test Configuration.

Pytest fixtures and configuration.
Requires Python 3.11+.
"""

from pathlib import Path
from typing import Generator

import pytest

from workspace.session import IntellisenseSession


@pytest.fixture
def sample_js_code() -> str:
    """Sample script with documented and undocumented functions."""
    return '''.pragma library

/**
 * Formats an account balance for display.
 * Uses two decimal places.
 * @param {number} amount - the balance
 * @param {string} currency - ISO currency code
 * @returns {string} formatted text
 */
function formatBalance(amount, currency) {
    return amount.toFixed(2) + " " + currency;
}

/** Adds two numbers. */
function add(a, b) {
    return a + b
}

/**
 * Detached documentation.
 */

function undocumented(x) {
    function nested(y) { return y }
    return nested(x)
}

// helper comment
function noParams() {
}
'''


@pytest.fixture
def sample_qml_code() -> str:
    """Sample QML document importing two scripts."""
    return '''import QtQuick 2.15
import QtQuick.Controls 2.15

import "../js/account-helper.js" as AccountHelperJS
import "../js/util.js" as UtilJS

Item {
    property string label: AccountHelperJS.formatBalance(10, "EUR")
    function go() { return UtilJS.clamp(1, 0, 2) + AccountHelperJS.add(3, 4) }
}
'''


@pytest.fixture
def workspace(tmp_path: Path, sample_js_code: str, sample_qml_code: str) -> Path:
    """
    Create a small QML/JS workspace.

    Layout:
        qml/Main.qml            imports both scripts
        qml/Other.qml           imports account-helper under another alias
        js/account-helper.js
        js/string_tools.js
        js/util.js
        node_modules/pkg/account.js   excluded
        build/accounts.js             excluded
    """
    (tmp_path / "qml").mkdir()
    (tmp_path / "js").mkdir()
    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "build").mkdir()

    (tmp_path / "qml" / "Main.qml").write_text(sample_qml_code)
    (tmp_path / "qml" / "Other.qml").write_text(
        'import QtQuick 2.15\n'
        'import "../js/account-helper.js" as Helper\n'
        '\n'
        'Text { text: Helper.add(1, 2) + Helper.addAll() }\n'
    )

    (tmp_path / "js" / "account-helper.js").write_text(sample_js_code)
    (tmp_path / "js" / "string_tools.js").write_text(
        "function trim(text) {\n    return text.trim()\n}\n"
    )
    (tmp_path / "js" / "util.js").write_text(
        "function clamp(value, low, high) {\n"
        "    return Math.min(Math.max(value, low), high)\n"
        "}\n"
    )
    (tmp_path / "node_modules" / "pkg" / "account.js").write_text("function dep() {}\n")
    (tmp_path / "build" / "accounts.js").write_text("function built() {}\n")

    return tmp_path


@pytest.fixture
def session(workspace: Path) -> Generator[IntellisenseSession, None, None]:
    """A session over the sample workspace without a file watcher."""
    with IntellisenseSession(workspace, watch=False) as current:
        yield current

import sys

import pytest

from parsediag.utils import tooling


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1", True),
        ("true", True),
        ("YES", True),
        (" on ", True),
        ("0", False),
        ("false", False),
        ("", False),
    ],
)
def test_env_var_selects_mode(monkeypatch, value, expected):
    monkeypatch.setenv(tooling.TOOLING_MODE_ENV, value)
    tooling.reset_tooling_mode()
    assert tooling.is_tooling_mode() is expected


def test_detects_integration_module(monkeypatch):
    monkeypatch.delenv(tooling.TOOLING_MODE_ENV, raising=False)
    monkeypatch.setitem(sys.modules, "parsediag_lsp", object())
    tooling.reset_tooling_mode()
    assert tooling.is_tooling_mode() is True


def test_standalone_without_hints(monkeypatch):
    monkeypatch.delenv(tooling.TOOLING_MODE_ENV, raising=False)
    for name in tooling._TOOLING_MODULES:
        monkeypatch.delitem(sys.modules, name, raising=False)
    tooling.reset_tooling_mode()
    assert tooling.is_tooling_mode() is False


def test_mode_is_cached(monkeypatch):
    monkeypatch.setenv(tooling.TOOLING_MODE_ENV, "1")
    tooling.reset_tooling_mode()
    assert tooling.is_tooling_mode() is True

    # Later environment changes do not affect the cached answer
    monkeypatch.setenv(tooling.TOOLING_MODE_ENV, "0")
    assert tooling.is_tooling_mode() is True


def test_reset_forgets_cached_mode(monkeypatch):
    monkeypatch.setenv(tooling.TOOLING_MODE_ENV, "1")
    tooling.reset_tooling_mode()
    assert tooling.is_tooling_mode() is True

    monkeypatch.setenv(tooling.TOOLING_MODE_ENV, "0")
    tooling.reset_tooling_mode()
    assert tooling.is_tooling_mode() is False


def test_general_purpose_lsp_library_does_not_switch_mode(monkeypatch):
    monkeypatch.delenv(tooling.TOOLING_MODE_ENV, raising=False)
    monkeypatch.delitem(sys.modules, "parsediag_lsp", raising=False)
    monkeypatch.setitem(sys.modules, "pygls", object())
    tooling.reset_tooling_mode()
    assert tooling.is_tooling_mode() is False

"""Pytest configuration and fixtures for parsediag tests."""

import pytest

from parsediag import TOKEN_IMAGE, ParseError, TokenKind
from parsediag.utils import tooling

from .tokens import failure_at, tok


@pytest.fixture(autouse=True)
def standalone_mode(monkeypatch):
    """Pin the verbose prefix so results do not depend on the host process."""
    monkeypatch.setenv(tooling.TOOLING_MODE_ENV, "0")
    tooling.reset_tooling_mode()
    yield
    tooling.reset_tooling_mode()


@pytest.fixture
def tooling_mode(monkeypatch):
    """Switch diagnostics to the compact IDE prefix."""
    monkeypatch.setenv(tooling.TOOLING_MODE_ENV, "1")
    tooling.reset_tooling_mode()


@pytest.fixture
def unclosed_if_error():
    """Grammar failure: end of file while an #if is still open."""
    current = failure_at(tok(TokenKind.EOF, "", line=4, col=1))
    return ParseError.from_grammar_failure(
        current,
        [[TokenKind.END_IF], [TokenKind.ELSE]],
        TOKEN_IMAGE,
    )


@pytest.fixture
def unexpected_token_error():
    """Grammar failure: a comma where a closing parenthesis was expected."""
    current = failure_at(tok(TokenKind.COMMA, ",", line=2, col=9))
    return ParseError.from_grammar_failure(
        current,
        [[TokenKind.CLOSE_PAREN], [TokenKind.PLUS]],
        TOKEN_IMAGE,
    )

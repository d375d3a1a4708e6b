"""Embedding/tooling mode detection.

When diagnostics are consumed by an IDE integration, messages use the compact
``[col. N] `` prefix instead of the verbose "Parsing error in ..." header.

The mode is resolved on first use and cached in a module global. Resolution is
a pure function of the process environment, so two threads racing on first use
compute the same answer and no lock is needed.

Respects:
    - PARSEDIAG_TOOLING_MODE environment variable (1/true/yes/on)
    - The parsediag_lsp editor integration already present in ``sys.modules``
"""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)

TOOLING_MODE_ENV = "PARSEDIAG_TOOLING_MODE"

# Our own editor integration; general-purpose LSP libraries do not count
_TOOLING_MODULES = frozenset({"parsediag_lsp"})

_TRUTHY = frozenset({"1", "true", "yes", "on"})

# None until first resolved
_TOOLING_MODE: bool | None = None


def _detect_tooling_mode() -> bool:
    """Classify the current process as standalone or embedded in a tool."""
    flag = os.environ.get(TOOLING_MODE_ENV)
    if flag is not None:
        return flag.strip().lower() in _TRUTHY
    return any(name in sys.modules for name in _TOOLING_MODULES)


def is_tooling_mode() -> bool:
    """Return True if messages should use the compact tooling prefix."""
    global _TOOLING_MODE
    mode = _TOOLING_MODE
    if mode is None:
        mode = _detect_tooling_mode()
        logger.debug("Diagnostics tooling mode resolved to %s", mode)
        _TOOLING_MODE = mode
    return mode


def reset_tooling_mode() -> None:
    """Forget the cached mode so the next render resolves it again."""
    global _TOOLING_MODE
    _TOOLING_MODE = None

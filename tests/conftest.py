from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in (
        "NSSH_HOME",
        "NSSH_DSH_DIR",
        "NSSH_LAST_FILE",
        "NSSH_SCREENRC",
        "NSSH_SCREEN_LISTS",
        "NSSH_SKIP_DISABLED",
        "NSSH_RESOLVE_NAMES",
        "NSSH_LIST_PREFIX",
        "NSSH_SCREEN_WINDOW_GAP",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

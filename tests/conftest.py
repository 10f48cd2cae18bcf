import json
import os
import sys

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, ROOT)

from mcp_easy_copy.config import Settings  # noqa: E402


@pytest.fixture
def candidates(tmp_path):
    return (
        tmp_path / "mac" / "claude_desktop_config.json",
        tmp_path / "linux" / "claude_desktop_config.json",
        tmp_path / "windows" / "claude_desktop_config.json",
    )


@pytest.fixture
def settings(candidates):
    return Settings(candidate_paths=candidates)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("MCP_EASY_COPY_CONFIG", raising=False)
    monkeypatch.delenv("MCP_EASY_COPY_DEBUG", raising=False)
    return home


def write_config(path, document):
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(document, str):
        path.write_text(document, encoding="utf-8")
    else:
        path.write_text(json.dumps(document), encoding="utf-8")
    return path

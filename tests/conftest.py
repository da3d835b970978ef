"""Pytest configuration for pykpathsea tests."""

import pytest

from pykpathsea.config.loader import clear_config_cache
from pykpathsea.tools.base import ToolResult


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests against a real kpsewhich",
    )


def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-integration"):
        skip = pytest.mark.skip(reason="needs --run-integration flag")
        for item in items:
            if "integration" in item.keywords:
                item.add_marker(skip)


class FakeRunner:
    """Records commands and returns a canned ToolResult."""

    def __init__(self, result: ToolResult | None = None):
        self.result = result or ToolResult.ok()
        self.calls: list[tuple[list[str], float | None]] = []

    def run(self, cmd, timeout=None):
        self.calls.append((list(cmd), timeout))
        return self.result


@pytest.fixture()
def fake_runner():
    return FakeRunner()


@pytest.fixture()
def make_runner():
    return FakeRunner


@pytest.fixture()
def isolated_config(tmp_path, monkeypatch):
    """Point config resolution at an empty root and cwd."""
    root = tmp_path / "root"
    work = tmp_path / "work"
    root.mkdir()
    work.mkdir()
    monkeypatch.setenv("PYKPATHSEA_ROOT", str(root))
    monkeypatch.delenv("PYKPATHSEA_TEX_PATH", raising=False)
    monkeypatch.delenv("PYKPATHSEA_TIMEOUT", raising=False)
    monkeypatch.chdir(work)
    clear_config_cache()
    yield root
    clear_config_cache()

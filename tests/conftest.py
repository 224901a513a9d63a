"""Shared fixtures: isolate tests from the real ~/.variant-guard config."""
import pytest

from variant_guard import config


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME at an empty temp dir and reset the config cache."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    config.reload_config()
    yield home
    config.reload_config()


@pytest.fixture
def write_config(isolated_home):
    """Write ~/.variant-guard/config.yaml and reload config."""
    def _write(text: str):
        cfg_dir = isolated_home / ".variant-guard"
        cfg_dir.mkdir(exist_ok=True)
        (cfg_dir / "config.yaml").write_text(text)
        return config.reload_config()
    return _write

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep a real user config file out of the tests."""
    path = tmp_path / "passgen-config.json"
    monkeypatch.setenv("PASSGEN_CONFIG", str(path))
    return path

import pytest

from bracketdom.config import reset_config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's config file and BRACKETDOM_* env out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in (
        "BRACKETDOM_MAX_DEPTH",
        "BRACKETDOM_INDENT",
        "BRACKETDOM_SHOW_OFFSETS",
        "BRACKETDOM_SHOW_ATTRIBUTES",
        "BRACKETDOM_MAX_CONTENT",
    ):
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()

import pytest

from lazyiter import SeqConfig


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Give every test the default configuration."""
    monkeypatch.delenv("LAZYITER_SINGLE_SHOT_POLICY", raising=False)
    monkeypatch.delenv("LAZYITER_SEPARATOR", raising=False)
    config = SeqConfig.global_config()
    config.reset()
    yield config
    config.reset()

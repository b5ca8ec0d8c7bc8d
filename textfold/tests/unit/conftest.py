import pytest

from textfold.config import EncodingConfig
from textfold.encoding import mode


@pytest.fixture(autouse=True)
def _fresh_encoding_state(monkeypatch):
    monkeypatch.delenv(mode.OVERLOAD_ENV, raising=False)
    mode.configure(EncodingConfig())
    mode.reset_thread_state()
    yield
    mode.configure(EncodingConfig())
    mode.reset_thread_state()


@pytest.fixture
def overloaded():
    mode.configure(EncodingConfig(internal_encoding="UTF-8", func_overload=True))

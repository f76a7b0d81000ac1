import pytest

from wordfreq.app.settings import Settings

@pytest.fixture
def cfg(tmp_path):
    return Settings(LOG_LEVEL="DEBUG", LOG_FILE=str(tmp_path / "logs" / "wordfreq.log"))

@pytest.fixture
def write_input(tmp_path):
    def _write(text: str, name: str = "input.txt"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write

import pytest

from currencyapi.core.config import Settings

from .payloads import API_KEY


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=API_KEY, _env_file=None)

import pytest

from strmap.conf import CONFIG_YAML_ENV_VAR, reset_global_settings
from strmap.descriptor import clear_descriptor_cache
from strmap.utils.logging import LoggingOutput, setup_logging

setup_logging(logging_output=LoggingOutput.NULL, debug=True)


@pytest.fixture(autouse=True)
def _fresh_global_state(monkeypatch):
    monkeypatch.delenv(CONFIG_YAML_ENV_VAR, raising=False)
    reset_global_settings()
    yield
    reset_global_settings()
    clear_descriptor_cache()

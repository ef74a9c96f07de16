import pytest

from cognito_context import reset_config


@pytest.fixture(autouse=True)
def _reset_auth_config():
    yield
    reset_config()

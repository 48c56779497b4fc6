import pytest


@pytest.fixture
def anyio_backend():
    """Async tests run on asyncio, the loop the gateway is served on."""
    return "asyncio"

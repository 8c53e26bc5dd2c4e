import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ethgateway.settings")
os.environ.setdefault("ETH_RPC_URL", "http://localhost:8545")

import django

django.setup()

import pytest
from django.test import Client, override_settings
from django.test.utils import setup_test_environment, teardown_test_environment

from tests.stubs import StubChain, StubRpcClient


@pytest.fixture(scope="session", autouse=True)
def django_test_environment():
    """
    Same environment Django's own test runner sets up
    (adds `testserver` to ALLOWED_HOSTS, locmem email, ...)
    """
    setup_test_environment()
    try:
        yield
    finally:
        teardown_test_environment()


@pytest.fixture
def chain() -> StubChain:
    """
    Stubbed chain state, served by StubRpcClient for every request
    made while the fixture is active
    """
    stub_chain = StubChain()
    StubRpcClient.chain = stub_chain
    with override_settings(
        ETH_CLIENT_CLASS="tests.stubs.StubRpcClient",
        ETH_RPC_URL="http://stub.invalid",
    ):
        yield stub_chain
    StubRpcClient.chain = StubChain()


@pytest.fixture
def client() -> Client:
    return Client()

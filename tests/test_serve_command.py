import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from api.management.commands import serve


@pytest.fixture
def runserver_calls(monkeypatch):
    """Records what `serve` would hand to runserver instead of binding a socket"""
    calls = []

    def fake_call_command(name, *args, **kwargs):
        calls.append((name, args, kwargs))

    monkeypatch.setattr(serve, "call_command", fake_call_command)
    return calls


def test_serve_uses_configured_address(runserver_calls):
    with override_settings(ETH_RPC_URL="http://localhost:8545", GATEWAY_HOST="127.0.0.1", GATEWAY_PORT=3000):
        call_command("serve")
    assert runserver_calls == [
        ("runserver", ("127.0.0.1:3000",), {"use_ipv6": False, "use_reloader": False})
    ]


def test_serve_overrides(runserver_calls):
    with override_settings(ETH_RPC_URL="http://localhost:8545"):
        call_command("serve", host="::1", port="8080")
    assert runserver_calls == [("runserver", ("[::1]:8080",), {"use_ipv6": True, "use_reloader": False})]


def test_serve_refuses_without_rpc_url(runserver_calls):
    with override_settings(ETH_RPC_URL=None):
        with pytest.raises(CommandError, match="ETH_RPC_URL"):
            call_command("serve")
    assert runserver_calls == []


def test_serve_rejects_bad_port(runserver_calls):
    with override_settings(ETH_RPC_URL="http://localhost:8545"):
        with pytest.raises(CommandError):
            call_command("serve", port="70000")
    assert runserver_calls == []

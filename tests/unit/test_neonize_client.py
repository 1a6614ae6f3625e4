"""
Unit tests for the neonize adapter.

neonize's NewClient and build_jid are patched, so the Go library never
connects anywhere.
"""

import threading
import time
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

pytest.importorskip("neonize")

from neonize.events import PairStatusEv  # noqa: E402
from neonize.utils import build_jid  # noqa: E402

from inference import StubCompletionBackend  # noqa: E402
from infra.bootstrap import SessionBootstrap  # noqa: E402
from infra.config import RelayConfig  # noqa: E402
from transport.whatsapp.neonize_client import NeonizeWhatsAppClient  # noqa: E402
from transport.whatsapp.schemas import MessageEvent, OtherEvent, PairingCodeEvent  # noqa: E402


@pytest.fixture
def new_client():
    with patch("transport.whatsapp.neonize_client.NewClient") as cls:
        yield cls.return_value


@pytest.fixture
def adapter(new_client):
    client = NeonizeWhatsAppClient("session.db", connect_timeout_s=1.0)
    events = []
    client.add_event_handler(events.append)
    client.events = events
    return client


def make_message_ev(text="0> hi"):
    return SimpleNamespace(
        Info=SimpleNamespace(
            ID="ID1",
            MessageSource=SimpleNamespace(
                Sender=SimpleNamespace(User="15551234567", Server="s.whatsapp.net"),
                Chat=SimpleNamespace(User="15551234567", Server="s.whatsapp.net"),
            ),
        ),
        Message=SimpleNamespace(conversation=text),
    )


class TestEventTranslation:
    def test_message_event(self, adapter):
        adapter._on_message(None, make_message_ev())

        assert adapter.events == [
            MessageEvent(
                sender_id="15551234567",
                chat_id="15551234567@s.whatsapp.net",
                text="0> hi",
                message_id="ID1",
            )
        ]

    def test_undecodable_message_dropped(self, adapter):
        adapter._on_message(None, SimpleNamespace())
        assert adapter.events == []

    def test_qr_becomes_pairing_code(self, adapter):
        adapter._on_qr(None, b"2@code")
        assert adapter.events == [PairingCodeEvent(code="2@code")]

    def test_pair_status_becomes_success(self, adapter):
        event = PairStatusEv(ID=build_jid("15551234567"), Status=PairStatusEv.SUCCESS)
        adapter._on_pair_status(None, event)
        assert adapter.events == [OtherEvent(kind="success", detail="15551234567")]

    def test_failed_pair_status_becomes_error(self, adapter):
        event = PairStatusEv(Status=PairStatusEv.ERROR, Error="pairing rejected")
        adapter._on_pair_status(None, event)
        assert adapter.events == [OtherEvent(kind="error", detail="pairing rejected")]

    def test_failed_pairing_does_not_complete_bootstrap(self, adapter, caplog):
        bootstrap = SessionBootstrap(
            config=RelayConfig.from_env(),
            client=adapter,
            backend=StubCompletionBackend(),
            store=MagicMock(has_device=MagicMock(return_value=False)),
            render_code=MagicMock(),
        )
        adapter.connect = MagicMock()
        bootstrap.start()

        with caplog.at_level("INFO"):
            adapter._on_pair_status(None, PairStatusEv(Status=PairStatusEv.ERROR, Error="pairing rejected"))

        assert not bootstrap.paired.is_set()
        assert bootstrap.pairing is True
        assert "Login event: error" in caplog.text
        assert "Login event: success" not in caplog.text

    def test_connected(self, adapter):
        adapter._on_connected(None, object())
        assert adapter.events == [OtherEvent(kind="connected")]

    def test_failing_handler_does_not_stop_dispatch(self, adapter):
        seen = []
        adapter._handlers.insert(0, MagicMock(side_effect=RuntimeError("boom")))
        adapter.add_event_handler(seen.append)

        adapter._on_connected(None, object())

        assert len(seen) == 1
        assert len(adapter.events) == 1


class TestConnect:
    def test_connect_returns_once_connected(self, adapter, new_client):
        blocker = threading.Event()

        def fake_connect():
            adapter._on_connected(None, object())
            blocker.wait(5)

        new_client.connect.side_effect = fake_connect
        adapter.connect()

        assert OtherEvent(kind="connected") in adapter.events
        blocker.set()

    def test_connect_failure_raises(self, adapter, new_client):
        new_client.connect.side_effect = RuntimeError("store locked")

        with pytest.raises(ConnectionError, match="store locked"):
            adapter.connect()

    def test_connect_timeout_raises(self, adapter, new_client):
        blocker = threading.Event()
        new_client.connect.side_effect = lambda: blocker.wait(5)
        adapter.connect_timeout_s = 0.1

        started = time.monotonic()
        with pytest.raises(ConnectionError, match="not established"):
            adapter.connect()
        assert time.monotonic() - started < 2
        blocker.set()

    def test_disconnect(self, adapter, new_client):
        adapter.disconnect()
        new_client.disconnect.assert_called_once_with()


class TestSendText:
    def test_send_builds_jid(self, adapter, new_client):
        with patch("transport.whatsapp.neonize_client.build_jid", return_value="JID") as build_jid:
            adapter.send_text("120363000000000000@g.us", "hello")

        build_jid.assert_called_once_with("120363000000000000", "g.us")
        new_client.send_message.assert_called_once_with("JID", "hello")

"""
Unit tests for the process entry point.
"""

from unittest.mock import patch

import pytest

import main
from infra.bootstrap import FatalBootstrapError


class TestBuildConfig:
    def test_flags_override_environment(self, monkeypatch):
        monkeypatch.setenv("WHATSAPP_SESSION_DB", "env.db")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        config = main.build_config(main.parse_args(["--session-db", "cli.db", "--log-level", "DEBUG"]))

        assert config.session_db_path == "cli.db"
        assert config.log_level == "DEBUG"

    def test_environment_used_without_flags(self, monkeypatch):
        monkeypatch.setenv("WHATSAPP_SESSION_DB", "env.db")

        config = main.build_config(main.parse_args([]))

        assert config.session_db_path == "env.db"


class TestMain:
    def test_fatal_bootstrap_exits_non_zero(self):
        with patch("main.bootstrap_relay") as bootstrap_relay:
            bootstrap_relay.return_value.run.side_effect = FatalBootstrapError("refused")
            assert main.main([]) == 1

    def test_clean_shutdown_exits_zero(self):
        with patch("main.bootstrap_relay") as bootstrap_relay:
            assert main.main([]) == 0
            bootstrap_relay.return_value.run.assert_called_once_with()

    def test_bootstrap_receives_built_config(self, monkeypatch):
        monkeypatch.setenv("WHATSAPP_SESSION_DB", "env.db")
        with patch("main.bootstrap_relay") as bootstrap_relay:
            main.main(["--session-db", "cli.db"])

        (config,) = bootstrap_relay.call_args.args
        assert config.session_db_path == "cli.db"

    @pytest.mark.parametrize(
        "name, value",
        [
            ("WHATSAPP_CONNECT_TIMEOUT_S", "soon"),
            ("WHATSAPP_CONNECT_TIMEOUT_S", "0"),
            ("LOG_LEVEL", "chatty"),
        ],
    )
    def test_invalid_configuration_exits_non_zero(self, monkeypatch, caplog, name, value):
        monkeypatch.setenv(name, value)
        with patch("main.bootstrap_relay") as bootstrap_relay:
            assert main.main([]) == 1

        bootstrap_relay.assert_not_called()
        assert "Invalid configuration" in caplog.text
        assert name in caplog.text

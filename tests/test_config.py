"""Tests for configuration, logging setup and the command line."""

import json
import logging

import pytest

from gen_forms import cli
from gen_forms.config import GenFormsConfig, get_config, update_config
from gen_forms.logging_setup import disable_logging, logged_operation, setup_logging


class TestConfig:
    """Tests for GenFormsConfig."""

    def test_defaults(self, monkeypatch):
        for name in ("GEN_FORMS_STORE", "DATABASE_URL", "GEN_FORMS_HTTP_PORT", "GEN_FORMS_API_URL"):
            monkeypatch.delenv(name, raising=False)
        config = GenFormsConfig.from_env()
        assert config.store_backend == "sql"
        assert config.database_url == "sqlite+aiosqlite:///./gen_forms.db"
        assert config.http_port == 2022
        assert config.api_url is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("GEN_FORMS_STORE", "MEMORY")
        monkeypatch.setenv("GEN_FORMS_VALIDATE_SUBMISSIONS", "true")
        monkeypatch.setenv("MCP_PORT", "9000")
        monkeypatch.setenv("GEN_FORMS_LOG_LEVEL", "debug")
        config = GenFormsConfig.from_env()
        assert config.store_backend == "memory"
        assert config.validate_submissions is True
        assert config.mcp_port == 9000
        assert config.log_level == "DEBUG"

    def test_unknown_store(self, monkeypatch):
        monkeypatch.setenv("GEN_FORMS_STORE", "redis")
        with pytest.raises(ValueError):
            GenFormsConfig.from_env()

    def test_update_config(self):
        original = get_config().ui_port
        try:
            assert update_config(ui_port=9999, not_a_setting=1).ui_port == 9999
            assert not hasattr(get_config(), "not_a_setting")
        finally:
            update_config(ui_port=original)


class TestLogging:
    """Tests for setup_logging and logged_operation."""

    def teardown_method(self):
        setup_logging(console=False)

    def test_setup_is_repeatable(self):
        """Test that calling setup twice does not stack handlers."""
        setup_logging(console=True)
        setup_logging(console=True)
        assert len(logging.getLogger("gen-forms").handlers) == 1
        assert logging.getLogger("gen-forms-http").propagate is False

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "gen_forms.log"
        setup_logging(console=False, file_path=str(log_file))
        logging.getLogger("gen-forms").info("hello file")
        for handler in logging.getLogger("gen-forms").handlers:
            handler.flush()
        assert "hello file" in log_file.read_text()

    def test_disable(self):
        disable_logging()
        assert logging.getLogger("gen-forms").disabled is True

    @pytest.mark.anyio
    async def test_failures_are_logged_and_raised(self, caplog, monkeypatch):
        monkeypatch.setattr(logging.getLogger("gen-forms"), "propagate", True)
        monkeypatch.setattr(logging.getLogger("gen-forms"), "disabled", False)
        with caplog.at_level(logging.DEBUG, logger="gen-forms"):
            with pytest.raises(KeyError):
                async with logged_operation("deleteForm", form_id="abc"):
                    raise KeyError("abc")
        messages = [r.getMessage() for r in caplog.records]
        assert "deleteForm started form_id=abc" in messages
        assert any(m.startswith("deleteForm failed after") for m in messages)


class TestCli:
    """Tests for the gen-forms command."""

    def teardown_method(self):
        setup_logging(console=False)

    def test_parse_prints_json(self, capsys):
        assert cli.main(["parse", "Signup. Email and country"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["title"] == "Signup"
        assert [f["name"] for f in output["fields"]] == ["email", "country"]

    def test_parse_empty_description(self, capsys):
        assert cli.main(["parse", ""]) == 1
        assert "description must not be empty" in capsys.readouterr().err

    def test_init_db(self, tmp_path, capsys):
        db_url = f"sqlite+aiosqlite:///{tmp_path}/cli.db"
        original = (get_config().store_backend, get_config().database_url)
        update_config(store_backend="sql", database_url=db_url)
        try:
            assert cli.main(["init-db"]) == 0
        finally:
            update_config(store_backend=original[0], database_url=original[1])
        assert (tmp_path / "cli.db").exists()

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.main([])

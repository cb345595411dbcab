"""Tests for command-line and configuration file handling."""

import json
import os

import pytest

from mvp24h_mcp.constants import DEFAULT_HOST, DEFAULT_PORT
from mvp24h_mcp.main import load_config_file, main, parse_args, resolve_settings


class TestResolveSettings:

    def test_defaults(self):
        settings = resolve_settings(parse_args([]), {})
        assert settings["transport"] == "stdio"
        assert settings["host"] == DEFAULT_HOST
        assert settings["port"] == DEFAULT_PORT
        assert settings["log_missing_docs"] is True
        assert os.path.isabs(settings["docs_dir"])

    def test_file_fills_missing_values(self, tmp_path):
        file_config = {"docs_dir": str(tmp_path), "transport": "sse", "port": "9001", "quiet_missing_docs": True}
        settings = resolve_settings(parse_args([]), file_config)
        assert settings["docs_dir"] == str(tmp_path)
        assert settings["transport"] == "sse"
        assert settings["port"] == 9001
        assert settings["log_missing_docs"] is False

    def test_command_line_wins(self, tmp_path):
        args = parse_args(["--docs-dir", str(tmp_path / "cli"), "--port", "7000", "--transport", "stdio"])
        file_config = {"docs_dir": str(tmp_path / "file"), "port": 9001, "transport": "sse"}
        settings = resolve_settings(args, file_config)
        assert settings["docs_dir"] == str(tmp_path / "cli")
        assert settings["port"] == 7000
        assert settings["transport"] == "stdio"

    def test_quiet_flag(self):
        settings = resolve_settings(parse_args(["--quiet-missing-docs"]), {"quiet_missing_docs": False})
        assert settings["log_missing_docs"] is False

    def test_invalid_transport_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--transport", "websocket"])


class TestConfigFile:

    def test_load(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"host": "0.0.0.0"}), encoding="utf-8")
        assert load_config_file(str(path)) == {"host": "0.0.0.0"}

    def test_invalid_json_exits(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            load_config_file(str(path))
        assert excinfo.value.code == 1

    def test_missing_file_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            load_config_file(str(tmp_path / "absent.json"))


class TestMain:

    def test_docs_dir_that_is_a_file(self, tmp_path, capsys):
        path = tmp_path / "docs.md"
        path.write_text("not a directory", encoding="utf-8")
        assert main(["--docs-dir", str(path)]) == 1
        assert "not a directory" in capsys.readouterr().err

"""Tests for plumage.cli: entrypoint and argument parsing."""

import json

import pytest

import plumage.cli._serve as serve_module
from plumage.cli import main
from plumage.cli._options import add_config_arguments, config_from_args
from plumage.config import Environment, Header
from plumage.themes import Theme


class TestCLIHelp:
    @pytest.mark.parametrize("argv", [["--help"], ["serve", "--help"], ["generate", "--help"]])
    def test_help_exits_zero(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "plumage" in capsys.readouterr().out

    def test_unknown_theme_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["config", "--theme", "neon"])
        assert exc_info.value.code == 2


class TestConfigCommand:
    def test_prints_runtime_document(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "config",
                "--title",
                "Pets",
                "--dark-mode",
                "--header",
                "Authorization=Bearer x",
                "--header",
                "X-Tenant=acme",
                "--env",
                "dev=http://localhost:8080",
                "--no-persist-params",
            ]
        )

        doc = json.loads(capsys.readouterr().out)
        assert doc["title"] == "Pets"
        assert doc["darkMode"] is True
        assert [h["key"] for h in doc["globalHeaders"]] == ["Authorization", "X-Tenant"]
        assert doc["environments"] == [{"name": "dev", "baseUrl": "http://localhost:8080"}]
        assert doc["persistParams"] is False

    def test_malformed_header_exits_2(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["config", "--header", "no-equals-sign"])
        assert exc_info.value.code == 2
        assert "NAME=VALUE" in capsys.readouterr().err


class TestConfigFromArgs:
    def test_maps_flags(self) -> None:
        import argparse

        parser = argparse.ArgumentParser()
        add_config_arguments(parser)
        args = parser.parse_args(
            [
                "--base-path",
                "/reference",
                "--theme",
                "modern",
                "--no-debug",
                "--header",
                "A=1",
                "--env",
                "prod=https://api.example.com",
                "--api-version",
                "2.1.0",
            ]
        )

        cfg = config_from_args(args)

        assert cfg.base_path == "/reference"
        assert cfg.ui_theme is Theme.MODERN
        assert cfg.enable_debug is False
        assert cfg.persist_params is None
        assert cfg.version == "2.1.0"
        assert cfg.global_headers == (Header("A", "1"),)
        assert cfg.environments == (Environment("prod", "https://api.example.com"),)


class TestGenerateCommand:
    def test_skipped_exits_cleanly(self, monkeypatch) -> None:
        monkeypatch.setattr("plumage.generator.shutil.which", lambda name: None)
        main(["generate"])

    def test_failure_exits_1(self, monkeypatch) -> None:
        import subprocess

        monkeypatch.setattr("plumage.generator.shutil.which", lambda name: "/bin/" + name)
        monkeypatch.setattr(
            "plumage.generator.subprocess.run",
            lambda argv, **kw: subprocess.CompletedProcess(argv, 1),
        )
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--generator-arg=--parseInternal"])
        assert exc_info.value.code == 1


class TestServeCommand:
    def test_builds_app_and_runs(self, monkeypatch) -> None:
        calls: list[tuple] = []

        def fake_run(self, host, port, *, log_level="info"):
            calls.append((self.config.title, self.config.auto_generate, host, port, log_level))

        monkeypatch.setattr(serve_module.DocsApp, "run", fake_run)

        main(["--log-level", "debug", "serve", "--port", "9000", "--title", "Pets", "--auto-generate"])

        assert calls == [("Pets", True, "127.0.0.1", 9000, "debug")]

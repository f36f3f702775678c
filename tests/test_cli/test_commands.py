"""Tests for the click commands, run through CliRunner."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from transmute.cli.main import cli
from transmute.core.errors import GenerationError

GENERATE = "transmute.generation.client.GenerationClient.generate"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    monkeypatch.delenv("TRANSMUTE_API_KEY", raising=False)
    return tmp_path


@pytest.fixture
def js_file(workdir: Path) -> Path:
    path = workdir / "app.js"
    path.write_text("var x = 1;\n")
    return path


# -----------------------------------------------------------------------
# languages / detect / analyze
# -----------------------------------------------------------------------
class TestInfoCommands:
    def test_languages(self, runner):
        result = runner.invoke(cli, ["languages"])
        assert result.exit_code == 0
        assert "56 supported languages" in result.output
        assert "Kubernetes YAML" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "transmute" in result.output

    def test_detect(self, runner, workdir):
        path = workdir / "main.go"
        path.write_text("package main\n\nimport \"fmt\"\n\nfunc main() {\n}\n")

        result = runner.invoke(cli, ["detect", str(path), "--scores"])

        assert result.exit_code == 0
        assert "Detected:" in result.output
        assert "Go" in result.output.split("Detected:")[1].split("\n")[0]
        assert "TypeScript" in result.output

    def test_analyze_with_security(self, runner, workdir):
        path = workdir / "bad.js"
        path.write_text("// parse input\nvar r = eval(data);\n")

        result = runner.invoke(cli, ["analyze", str(path), "--lang", "javascript", "--security"])

        assert result.exit_code == 0
        assert "Unsafe Eval" in result.output
        assert "placeholder" in result.output

    def test_analyze_rejects_unknown_language(self, runner, js_file):
        result = runner.invoke(cli, ["analyze", str(js_file), "--lang", "COBOL"])
        assert result.exit_code == 2


# -----------------------------------------------------------------------
# migrate
# -----------------------------------------------------------------------
class TestMigrateCommand:
    def test_json_success(self, runner, js_file):
        with patch(GENERATE, new=AsyncMock(return_value="```python\nx = 1\n```")):
            result = runner.invoke(cli, [
                "migrate", str(js_file), "--from", "JavaScript", "--to", "python",
                "--no-format", "--json",
            ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["status"] == "success"
        assert data["output_code"] == "x = 1"
        assert data["history_entry"]["to_lang"] == "Python"
        assert "+x = 1" in data["diff"]
        assert data["notifications"][-1] == {"level": "success", "message": "Migration complete!"}

    def test_writes_output_file(self, runner, js_file, workdir):
        out = workdir / "app.py"
        with patch(GENERATE, new=AsyncMock(return_value="```python\nx = 1\n```")):
            result = runner.invoke(cli, ["migrate", str(js_file), "--to", "Python", "-o", str(out)])

        assert result.exit_code == 0, result.output
        assert out.read_text() == "x = 1\n"
        assert "Detected source language" in result.output

    def test_options_override_settings(self, runner, js_file):
        mock = AsyncMock(return_value="x = 1")
        with patch(GENERATE, new=mock):
            result = runner.invoke(cli, [
                "migrate", str(js_file), "--from", "JavaScript", "--to", "Python",
                "--model", "claude-test", "--temperature", "0.1", "--prompt-append", "Be terse.", "--json",
            ])

        assert result.exit_code == 0, result.output
        prompt, model, temperature = mock.await_args.args[:3]
        assert "Be terse." in prompt
        assert model == "claude-test"
        assert temperature == 0.1

    def test_generation_failure_json(self, runner, js_file):
        error = GenerationError("Generation API error: quota exceeded", upstream="quota exceeded")
        with patch(GENERATE, new=AsyncMock(side_effect=error)):
            result = runner.invoke(cli, ["migrate", str(js_file), "--from", "JavaScript", "--to", "Python", "--json"])

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert data["status"] == "failed"
        assert data["error_type"] == "GenerationError"
        assert "quota exceeded" in data["error"]

    def test_generation_failure_prints_one_error_line(self, runner, js_file):
        error = GenerationError("Generation API error: quota exceeded", upstream="quota exceeded")
        with patch(GENERATE, new=AsyncMock(side_effect=error)):
            result = runner.invoke(cli, ["migrate", str(js_file), "--from", "JavaScript", "--to", "Python"])

        assert result.exit_code == 1
        assert result.output.count("quota exceeded") == 1
        assert "Migration failed:" in result.output
        assert "GenerationError:" not in result.output

    def test_input_report_in_json(self, runner, js_file):
        with patch(GENERATE, new=AsyncMock(return_value="```python\nx = 1\n```")):
            result = runner.invoke(cli, ["migrate", str(js_file), "--from", "JavaScript", "--to", "Python", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["input_report"]["language_detected"] == "JavaScript"
        assert data["input_report"]["lines_of_code"] == 2
        assert data["report"]["language_detected"] == "Python"

    def test_input_report_can_be_skipped(self, runner, js_file):
        with patch(GENERATE, new=AsyncMock(return_value="x = 1")):
            result = runner.invoke(cli, [
                "migrate", str(js_file), "--from", "JavaScript", "--to", "Python", "--no-input-report", "--json",
            ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["input_report"] is None

    def test_input_and_output_reports_printed(self, runner, js_file):
        with patch(GENERATE, new=AsyncMock(return_value="x = 1")):
            result = runner.invoke(cli, ["migrate", str(js_file), "--from", "JavaScript", "--to", "Python"])

        assert result.exit_code == 0, result.output
        assert "Input Analysis" in result.output
        assert "Output Analysis" in result.output

    def test_missing_api_key(self, runner, js_file, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        result = runner.invoke(cli, ["migrate", str(js_file), "--from", "JavaScript", "--to", "Python", "--json"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error_type"] == "ConfigurationError"

    def test_unknown_target_language(self, runner, js_file):
        result = runner.invoke(cli, ["migrate", str(js_file), "--to", "COBOL"])
        assert result.exit_code == 2

    def test_invalid_config_file_is_usage_error(self, runner, js_file, workdir):
        (workdir / "transmute.toml").write_text("[ai]\nmax_tokens = -5\n")
        result = runner.invoke(cli, ["migrate", str(js_file), "--to", "Python"])
        assert result.exit_code == 2


# -----------------------------------------------------------------------
# session
# -----------------------------------------------------------------------
class TestSessionCommand:
    def test_help_and_quit(self, runner, workdir):
        result = runner.invoke(cli, ["session"], input="help\nquit\n")
        assert result.exit_code == 0
        assert "migrate FILE TO [FROM]" in result.output
        assert "Session ended." in result.output

    def test_ends_on_eof(self, runner, workdir):
        result = runner.invoke(cli, ["session"], input="")
        assert result.exit_code == 0
        assert "Session ended." in result.output

    def test_migrate_then_history(self, runner, js_file):
        with patch(GENERATE, new=AsyncMock(return_value="```python\nx = 1\n```")):
            result = runner.invoke(
                cli, ["session"], input=f"migrate {js_file} Python JavaScript\nhistory\nquit\n"
            )

        assert result.exit_code == 0, result.output
        assert "Migration complete!" in result.output
        assert "Migration History" in result.output

    def test_set_changes_settings(self, runner, workdir):
        result = runner.invoke(
            cli, ["session"], input="set enable_security_scan on\nsettings\nquit\n"
        )
        assert result.exit_code == 0
        assert "enable_security_scan updated." in result.output

    def test_bad_setting_is_reported(self, runner, workdir):
        result = runner.invoke(cli, ["session"], input="set ai_config.temperature 9\nquit\n")
        assert result.exit_code == 0
        assert "Temperature must be within" in result.output

    def test_unknown_command(self, runner, workdir):
        result = runner.invoke(cli, ["session"], input="frobnicate\nquit\n")
        assert "Unknown command 'frobnicate'" in result.output

    def test_export(self, runner, workdir):
        target = workdir / "history.json"
        result = runner.invoke(cli, ["session"], input=f"export {target}\nquit\n")
        assert result.exit_code == 0
        assert json.loads(target.read_text()) == []

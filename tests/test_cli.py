"""Tests for CLI commands."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

import docs2questions.utils.config as config_module
from docs2questions import __version__
from docs2questions.cli import cli
from docs2questions.integration.pipeline import QuestionPipeline
from docs2questions.qa.synthesizer import QuestionSynthesizer
from docs2questions.utils.config import Config

PDF_BYTES = b"%PDF-1.4\n%fake\n"

EINSTEIN_WORDS = (
    "Albert Einstein developed the theory of relativity. "
    "It was a major breakthrough in physics and changed everything we know."
).split()


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run in a temp directory with a fresh global config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "_global_config", None)
    monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def pdf_path(workdir):
    path = workdir / "paper.pdf"
    path.write_bytes(PDF_BYTES)
    return path


@pytest.fixture
def first_template_pipeline():
    return QuestionPipeline(synthesizer=QuestionSynthesizer(chooser=lambda bank: bank[0]))


class TestCLIMain:
    """Tests for main CLI command."""

    def test_cli_version_option(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("extract", "generate", "strategies"):
            assert command in result.output

    def test_cli_with_config_file(self, runner, workdir):
        config_file = workdir / "custom.yml"
        config_file.write_text("selection:\n  max_candidates: 1\n")

        with patch("docs2questions.cli.cli_main.load_config") as mock_load:
            mock_load.return_value = Config()
            result = runner.invoke(cli, ["--config", str(config_file), "strategies"])

        assert result.exit_code == 0
        mock_load.assert_called_once_with(str(config_file))

    def test_cli_verbose_flag(self, runner, workdir):
        with patch("docs2questions.cli.cli_main.setup_cli_logging") as mock_setup:
            result = runner.invoke(cli, ["-vv", "strategies"])

        assert result.exit_code == 0
        assert mock_setup.call_args.kwargs["verbose"] == 2

    def test_logs_written_to_configured_file(self, runner, workdir):
        result = runner.invoke(cli, ["strategies"])
        assert result.exit_code == 0
        assert (workdir / "logs" / "docs2questions.log").exists()


class TestStrategiesCommand:
    def test_lists_in_output_order(self, runner, workdir):
        result = runner.invoke(cli, ["strategies"])
        assert result.exit_code == 0
        names = [line for line in result.output.splitlines() if line in {
            "template", "contextual", "generative"
        }]
        assert names == ["template", "contextual", "generative"]


class TestExtractCommand:
    def test_extract_to_file(self, runner, fake_pdf, pdf_path, workdir):
        fake_pdf([["Hello", "World"], ["Page", "two"]])
        output = workdir / "out" / "text.txt"

        result = runner.invoke(cli, ["extract", str(pdf_path), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8") == "Hello World\nPage two"
        assert "Saved to" in result.output

    def test_extract_to_stdout(self, runner, fake_pdf, pdf_path):
        fake_pdf([["Printed", "text"]])

        result = runner.invoke(cli, ["extract", str(pdf_path)])

        assert result.exit_code == 0
        assert "Printed text" in result.output

    def test_extract_rejects_declared_media_type(self, runner, fake_pdf, pdf_path):
        fake_pdf([["never"]])

        result = runner.invoke(
            cli, ["extract", str(pdf_path), "--media-type", "text/plain"]
        )

        assert result.exit_code == 1
        assert "Could not process" in result.output

    def test_extract_rejects_non_pdf_file(self, runner, workdir):
        path = workdir / "notes.txt"
        path.write_text("just some notes")

        result = runner.invoke(cli, ["extract", str(path)])

        assert result.exit_code == 1
        assert "text/plain" in result.output

    def test_extract_missing_file(self, runner, workdir):
        result = runner.invoke(cli, ["extract", str(workdir / "missing.pdf")])
        assert result.exit_code == 2


class TestGenerateCommand:
    def test_generate_text_report(
        self, runner, fake_pdf, pdf_path, workdir, first_template_pipeline
    ):
        fake_pdf([EINSTEIN_WORDS])
        output = workdir / "generated-questions.txt"

        result = runner.invoke(
            cli,
            ["generate", str(pdf_path), "--no-template", "--no-generative", "-o", str(output)],
            obj={"pipeline": first_template_pipeline},
        )

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8") == (
            "1. What can you tell about Albert?\n"
            "   Source: Albert Einstein developed the theory of relativity...\n"
            "   Type: CONTEXTUAL\n"
            "\n"
            "2. What can you tell about It?\n"
            "   Source: It was a major breakthrough in physics and changed everything we know...\n"
            "   Type: CONTEXTUAL\n"
        )

    def test_generate_json(self, runner, fake_pdf, pdf_path, workdir):
        fake_pdf([EINSTEIN_WORDS])
        output = workdir / "questions.json"

        result = runner.invoke(
            cli, ["generate", str(pdf_path), "--format", "json", "-o", str(output)]
        )

        assert result.exit_code == 0, result.output
        records = json.loads(output.read_text(encoding="utf-8"))
        assert [r["id"] for r in records] == [
            "template-0",
            "contextual-0",
            "generative-0",
            "template-1",
            "contextual-1",
            "generative-1",
        ]

    def test_generate_seed_is_reproducible(self, runner, fake_pdf, pdf_path, workdir):
        fake_pdf([EINSTEIN_WORDS])
        outputs = [workdir / "a.json", workdir / "b.json"]

        for output in outputs:
            result = runner.invoke(
                cli,
                ["generate", str(pdf_path), "--seed", "5", "--format", "json", "-o", str(output)],
            )
            assert result.exit_code == 0, result.output

        assert outputs[0].read_text() == outputs[1].read_text()

    def test_generate_strategies_from_config(self, runner, fake_pdf, pdf_path, workdir):
        fake_pdf([EINSTEIN_WORDS])
        config_file = workdir / "config.yml"
        config_file.write_text(
            "generation:\n  strategies:\n    template: false\n    contextual: false\n"
        )
        output = workdir / "q.json"

        result = runner.invoke(
            cli,
            ["--config", str(config_file), "generate", str(pdf_path), "--format", "json", "-o", str(output)],
        )

        assert result.exit_code == 0, result.output
        records = json.loads(output.read_text())
        assert {r["type"] for r in records} == {"generative"}

    def test_generate_all_disabled_warns(self, runner, fake_pdf, pdf_path):
        fake_pdf([EINSTEIN_WORDS])

        result = runner.invoke(
            cli,
            ["generate", str(pdf_path), "--no-template", "--no-contextual", "--no-generative"],
        )

        assert result.exit_code == 0
        assert "All strategies are disabled" in result.output
        assert "No questions found" in result.output

    def test_generate_no_candidates(self, runner, fake_pdf, pdf_path):
        fake_pdf([["Short."], ["Tiny."]])

        result = runner.invoke(cli, ["generate", str(pdf_path)])

        assert result.exit_code == 0
        assert "No questions found" in result.output

    def test_generate_corrupt_page(self, runner, fake_pdf, pdf_path):
        fake_pdf([["fine"], RuntimeError("bad stream")])

        result = runner.invoke(cli, ["generate", str(pdf_path)])

        assert result.exit_code == 1
        assert "Page 2" in result.output

    def test_generate_save_uses_configured_filename(self, runner, fake_pdf, pdf_path, workdir):
        fake_pdf([EINSTEIN_WORDS])
        config_file = workdir / "custom.yml"
        config_file.write_text("export:\n  filename: reports/questions.txt\n")

        result = runner.invoke(
            cli, ["--config", str(config_file), "generate", str(pdf_path), "--save"]
        )

        assert result.exit_code == 0, result.output
        report = workdir / "reports" / "questions.txt"
        assert report.read_text(encoding="utf-8").startswith("1. ")
        assert "Saved to" in result.output

    def test_generate_output_overrides_save(self, runner, fake_pdf, pdf_path, workdir):
        fake_pdf([EINSTEIN_WORDS])
        output = workdir / "explicit.txt"

        result = runner.invoke(
            cli, ["generate", str(pdf_path), "--save", "-o", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert output.exists()
        assert not (workdir / "generated-questions.txt").exists()

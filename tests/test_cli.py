"""Tests for the command line interface."""

import pytest
import yaml
from rich.console import Console
from typer.testing import CliRunner

from conftest import STRONG_RESUME_TEXT

from resume_assistant import cli
from resume_assistant.cli import _render_resume, app
from resume_assistant.config import AppConfig
from resume_assistant.models.document import EducationEntry, ExperienceEntry, Identity, ResumeDocument

runner = CliRunner()


@pytest.fixture
def no_delay(monkeypatch):
    monkeypatch.setattr(cli, "load_config", lambda: AppConfig())


@pytest.fixture
def resume_docx(tmp_path):
    from docx import Document

    path = tmp_path / "resume.docx"
    doc = Document()
    for line in STRONG_RESUME_TEXT.splitlines():
        doc.add_paragraph(line)
    doc.save(str(path))
    return path


class TestQuestions:
    def test_lists_plan(self):
        result = runner.invoke(app, ["questions", "I need a resume"])
        assert result.exit_code == 0
        assert "24 questions" in result.output

    def test_profile_skips_known_fields(self, tmp_path):
        profile = tmp_path / "profile.yaml"
        profile.write_text(yaml.safe_dump({"personal_info": {"name": "Jane Doe"}}))
        result = runner.invoke(app, ["questions", "I need a resume", "--profile", str(profile)])
        assert result.exit_code == 0
        assert "23 questions" in result.output

    def test_missing_profile(self, tmp_path):
        result = runner.invoke(
            app, ["questions", "I need a resume", "--profile", str(tmp_path / "nope.yaml")]
        )
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_malformed_profile_yaml(self, tmp_path):
        profile = tmp_path / "profile.yaml"
        profile.write_text("personal_info: [unclosed\n")
        result = runner.invoke(app, ["questions", "I need a resume", "--profile", str(profile)])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output

    def test_invalid_profile(self, tmp_path):
        profile = tmp_path / "profile.yaml"
        profile.write_text("years_experience: -3\n")
        result = runner.invoke(app, ["questions", "I need a resume", "--profile", str(profile)])
        assert result.exit_code == 1
        assert "Invalid profile" in result.output


class TestScore:
    def test_yaml_draft(self, tmp_path, full_draft):
        path = tmp_path / "draft.yaml"
        path.write_text(yaml.safe_dump(full_draft.model_dump()))
        result = runner.invoke(app, ["score", str(path)])
        assert result.exit_code == 0
        assert "100/100" in result.output

    def test_json_draft(self, tmp_path, full_draft):
        path = tmp_path / "draft.json"
        path.write_text(full_draft.model_dump_json())
        result = runner.invoke(app, ["score", str(path)])
        assert result.exit_code == 0
        assert "100/100" in result.output

    def test_empty_draft(self, tmp_path):
        path = tmp_path / "draft.yaml"
        path.write_text("")
        result = runner.invoke(app, ["score", str(path)])
        assert result.exit_code == 0
        assert "0/100" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["score", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "draft.yaml"
        path.write_text("skills: [Python, SQL\nsummary: {")
        result = runner.invoke(app, ["score", str(path)])
        assert result.exit_code == 1
        assert "Invalid YAML" in result.output


class TestAnalyze:
    def test_docx(self, resume_docx):
        result = runner.invoke(app, ["analyze", str(resume_docx)])
        assert result.exit_code == 0
        assert "Overall" in result.output
        assert "Rating" in result.output

    def test_random_seeded(self, resume_docx):
        first = runner.invoke(app, ["analyze", str(resume_docx), "--random", "--seed", "5"])
        second = runner.invoke(app, ["analyze", str(resume_docx), "--random", "--seed", "5"])
        assert first.exit_code == 0
        assert first.output == second.output

    def test_unsupported_type(self, tmp_path):
        path = tmp_path / "resume.txt"
        path.write_text("Jane Doe")
        result = runner.invoke(app, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "Please upload a PDF or Word document (.docx)" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "resume.pdf")])
        assert result.exit_code == 1
        assert "File not found" in result.output


class TestChat:
    def test_unknown_then_quit(self, no_delay):
        result = runner.invoke(app, ["chat"], input="hello\nquit\n")
        assert result.exit_code == 0
        assert "I understand!" in result.output

    def test_end_of_input_exits(self, no_delay):
        result = runner.invoke(app, ["chat"], input="")
        assert result.exit_code == 0

    def test_full_interview(self, no_delay):
        answers = ["I need a resume", "Jane Doe"] + ["n/a"] * 23 + ["thanks", "quit"]
        result = runner.invoke(app, ["chat"], input="\n".join(answers) + "\n")
        assert result.exit_code == 0
        assert "Your Resume" in result.output
        assert "Completeness score" in result.output
        assert "Jane Doe" in result.output
        assert "professional@email.com" in result.output

    def test_reset_command(self, no_delay):
        result = runner.invoke(app, ["chat"], input="I need a resume\nreset\nquit\n")
        assert result.exit_code == 0
        assert "Session reset." in result.output

    def test_profile_prefills(self, no_delay, tmp_path):
        profile = tmp_path / "profile.yaml"
        profile.write_text(yaml.safe_dump({"personal_info": {"name": "Jane Doe"}}))
        answers = ["I need a resume"] + ["n/a"] * 23 + ["quit"]
        result = runner.invoke(
            app, ["chat", "--profile", str(profile)], input="\n".join(answers) + "\n"
        )
        assert result.exit_code == 0
        assert "Jane Doe" in result.output

    def test_bracketed_answers_are_shown_verbatim(self, no_delay):
        answers = ["I need a resume", "Jane [/b] Doe"] + ["n/a"] * 23 + ["quit"]
        result = runner.invoke(app, ["chat"], input="\n".join(answers) + "\n")
        assert result.exit_code == 0
        assert "Jane [/b] Doe" in result.output


class TestRenderResume:
    def test_bracketed_text_is_literal(self):
        document = ResumeDocument(
            identity=Identity(name="Jane [/b] Doe", email="jane@example.com", phone="555-0100"),
            summary="Engineer [remote].",
            experience=[
                ExperienceEntry(
                    title="Engineer",
                    organization="Acme [Labs]",
                    duration="2020 - Present",
                    achievements=["Cut costs [by 30%]."],
                )
            ],
            education=[EducationEntry(credential="B.S.", institution="State University", year="2016")],
            skills=["C[++]"],
            certifications=["[bold]PMP"],
        )
        console = Console(record=True, width=200)
        console.print(_render_resume(document))
        text = console.export_text()
        assert "Jane [/b] Doe" in text
        assert "Engineer [remote]." in text
        assert "Engineer, Acme [Labs] (2020 - Present)" in text
        assert "Cut costs [by 30%]." in text
        assert "C[++]" in text
        assert "[bold]PMP" in text

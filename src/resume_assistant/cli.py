"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from resume_assistant.assistant import GREETING, ResumeAssistant
from resume_assistant.config import AnalysisConfig, load_config
from resume_assistant.errors import UnsupportedDocumentError
from resume_assistant.interview.conversation import progress as interview_progress
from resume_assistant.interview.sequencer import plan_questions
from resume_assistant.models.document import DraftDocument, ResumeDocument
from resume_assistant.models.profile import Profile
from resume_assistant.models.score import CATEGORY_WEIGHTS, Severity
from resume_assistant.models.session import ConversationState, SessionState

app = typer.Typer(
    name="resume-assistant",
    help="Guided resume interview, synthesis and scoring",
    no_args_is_help=True,
)
console = Console()

CATEGORY_TITLES = {
    "formatting": "Formatting",
    "ats_compatibility": "ATS Compatibility",
    "keywords": "Keywords",
    "experience": "Experience",
    "education": "Education",
    "skills": "Skills",
}

SEVERITY_STYLES = {
    Severity.BLOCKING: "red",
    Severity.ADVISORY: "yellow",
    Severity.POSITIVE: "green",
}


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        console.print(f"[red]File not found: {escape(str(path))}[/red]")
        raise typer.Exit(1)
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        console.print(f"[red]Invalid YAML in {escape(str(path))}:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)


def _load_profile(path: Path | None) -> Profile:
    if path is None:
        return Profile()
    try:
        return Profile.model_validate(_read_yaml(path))
    except ValidationError as e:
        console.print(f"[red]Invalid profile {escape(str(path))}:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)


def _render_resume(document: ResumeDocument) -> str:
    """Format a resume as rich markup; every document value is escaped."""
    identity = document.identity
    contact = [identity.email, identity.phone]
    contact += [v for v in (identity.location, identity.linkedin, identity.website) if v]
    lines = [
        f"[bold]{escape(identity.name)}[/bold]",
        escape(" | ".join(contact)),
        "",
        escape(document.summary),
        "",
    ]

    lines.append("[bold]Experience[/bold]")
    for entry in document.experience:
        lines.append(escape(f"{entry.title}, {entry.organization} ({entry.duration})"))
        lines.extend(f"  - {escape(a)}" for a in entry.achievements)
    lines.append("")

    lines.append("[bold]Education[/bold]")
    for entry in document.education:
        lines.append(escape(f"{entry.credential}, {entry.institution} ({entry.year})"))
    lines.append("")

    lines.append("[bold]Skills[/bold]")
    lines.append(escape(", ".join(document.skills)))
    if document.certifications:
        lines.append("")
        lines.append("[bold]Certifications[/bold]")
        lines.extend(f"  - {escape(c)}" for c in document.certifications)
    return "\n".join(lines)


@app.command()
def chat(
    profile: Path = typer.Option(None, "--profile", "-p", help="YAML profile with answers already known"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Build a resume through an interactive interview."""
    _configure_logging(verbose)
    assistant = ResumeAssistant(load_config())
    session = SessionState(profile=_load_profile(profile))

    console.print(Panel(GREETING, title="Resume Assistant"))
    console.print("[dim]Type 'reset' to start over or 'quit' to exit.[/dim]")

    while True:
        try:
            text = console.input("\n[bold cyan]You:[/bold cyan] ").strip()
        except EOFError:
            break
        if not text:
            continue
        command = text.lower()
        if command in ("quit", "exit"):
            break
        if command == "reset":
            session = assistant.reset(session)
            console.print("[green]Session reset.[/green]")
            continue

        reply, session = assistant.respond(text, session)
        if session.state is ConversationState.INTERVIEWING:
            answered, total = interview_progress(session)
            console.print(f"\n[bold]Assistant[/bold] [dim]({answered + 1}/{total})[/dim]: {escape(reply)}")
        else:
            console.print(f"\n[bold]Assistant:[/bold] {escape(reply)}")

        if session.state is ConversationState.SYNTHESIZING:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
            ) as bar:
                bar.add_task("Generating resume...", total=None)
                session = asyncio.run(assistant.finish(session))

            document = session.document
            console.print(Panel(_render_resume(document), title="Your Resume"))
            console.print(f"[green]Completeness score: {document.score}/100[/green]")


@app.command()
def questions(
    trigger: str = typer.Argument(help="Request that starts the interview"),
    profile: Path = typer.Option(None, "--profile", "-p", help="YAML profile with answers already known"),
) -> None:
    """Show the interview questions planned for a request."""
    planned = plan_questions(trigger, _load_profile(profile))
    console.print(f"[bold]{len(planned)} questions[/bold]")
    for i, question in enumerate(planned, 1):
        console.print(f"  {i:2d}. {question.prompt} [dim]({question.field})[/dim]")


@app.command()
def score(
    draft_file: Path = typer.Argument(help="Draft resume in YAML or JSON"),
) -> None:
    """Score a resume draft for completeness."""
    try:
        draft = DraftDocument.model_validate(_read_yaml(draft_file))
    except ValidationError as e:
        console.print(f"[red]Invalid draft {escape(str(draft_file))}:[/red]\n{escape(str(e))}")
        raise typer.Exit(1)

    value = ResumeAssistant(load_config()).score_draft(draft)
    color = "green" if value >= 80 else "yellow"
    console.print(f"Completeness: [bold {color}]{value}/100[/bold {color}]")


@app.command()
def analyze(
    file: Path = typer.Argument(help="Resume to analyze (PDF/DOCX)"),
    seed: int = typer.Option(None, "--seed", help="Seed for the random heuristics"),
    random: bool = typer.Option(False, "--random", help="Use random placeholder heuristics"),
) -> None:
    """Analyze an existing resume and suggest improvements."""
    if not file.exists():
        console.print(f"[red]File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    config = load_config()
    analysis = AnalysisConfig(
        heuristics="random" if random else config.analysis.heuristics,
        seed=seed if seed is not None else config.analysis.seed,
    )
    assistant = ResumeAssistant(dataclasses.replace(config, analysis=analysis))

    try:
        result = assistant.analyze_uploaded_document(file)
    except UnsupportedDocumentError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Analysis: {escape(file.name)}")
    table.add_column("Category")
    table.add_column("Weight", justify="right")
    table.add_column("Score", justify="right")
    for name, weight in CATEGORY_WEIGHTS.items():
        table.add_row(CATEGORY_TITLES[name], f"{weight}%", str(getattr(result.breakdown, name)))
    table.add_row("[bold]Overall[/bold]", "", f"[bold]{result.breakdown.overall}[/bold]")
    console.print(table)
    console.print(f"Rating: [bold]{result.label}[/bold]")

    if result.suggestions:
        console.print("\n[bold]Suggestions:[/bold]")
        for s in result.suggestions:
            style = SEVERITY_STYLES[s.severity]
            console.print(f"  [{style}]{s.category}[/{style}]: {s.message}")


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
Command-line interface for authoring a resume step by step.

State lives in the autosave file of local storage (CVWIZARD_STORAGE_DIR), so
every command picks up where the previous one left off.

Commands:
    show           - Print the composed markdown preview
    step           - Show progress, optionally step back
    set            - Set a scalar or presentation field
    add            - Add an empty entry to a structured list
    edit           - Edit one field of an entry
    remove         - Remove an entry
    move           - Move an entry up or down
    skill / hobby  - Add a skill or hobby
    section-move   - Reorder sections
    section-hide   - Hide a section
    section-show   - Show a section
    keywords       - List job description keywords missing from the resume
    export/import  - Write or read a resume data file
    reset          - Start over
"""

from pathlib import Path

import typer
from dotenv import load_dotenv

from cvwizard.contexts.authoring.exceptions import InvalidFieldError, UnknownEntryKindError, UnknownSectionError
from cvwizard.contexts.authoring.session import AuthoringSession
from cvwizard.contexts.composing.preview import render_preview
from cvwizard.contexts.persistence.autosave import AutosaveScheduler, load_autosaved_session
from cvwizard.contexts.persistence.storage import LocalStore
from cvwizard.contexts.persistence.transfer import export_to_file, import_from_file
from cvwizard.contexts.targeting.keyword_gap import KeywordGapAnalyzer
from cvwizard.utils.logger import setup_logger

load_dotenv()

DIRECTIONS = {"up": -1, "down": 1}

app = typer.Typer(
    add_completion=False,
    help="Author a resume step by step",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    setup_logger(context_name="cli", extra_provenance={"Storage": LocalStore().directory})


def _open_session() -> tuple:
    """Load the autosaved session and arrange for changes to be saved."""
    store = LocalStore()
    session = load_autosaved_session(store)
    scheduler = AutosaveScheduler(store, delay=0).attach(session)
    return session, scheduler


def _direction(value: str) -> int:
    if value not in DIRECTIONS:
        typer.secho(f"Error: direction must be 'up' or 'down', got '{value}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return DIRECTIONS[value]


def _fail(error: Exception) -> None:
    typer.secho(f"Error: {error}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _save(scheduler: AutosaveScheduler) -> None:
    if scheduler.flush() and scheduler.writes == 0:
        typer.secho("Warning: changes could not be saved", fg=typer.colors.YELLOW, err=True)


def _print_errors(session: AuthoringSession) -> None:
    for name, message in session.errors.items():
        if message:
            typer.secho(f"  ! {name}: {message}", fg=typer.colors.YELLOW)


@app.command("show")
def show_command():
    """Print the composed resume preview as markdown."""
    session, _ = _open_session()
    typer.echo(render_preview(session))


@app.command("step")
def step_command(
    backward: bool = typer.Option(False, "--back", help="Go back one step"),
):
    """
    Show wizard progress.

    The current step is not persisted, so progress is replayed from the first
    step every time: each complete step is passed until a blocked one.
    """
    session, _ = _open_session()
    while session.next_step():
        pass

    if backward:
        session.previous_step()

    for label, state in session.gate.progress():
        marker = {"complete": "✓", "active": "→", "upcoming": "·"}[state]
        typer.echo(f"{marker} {label}")
    _print_errors(session)


@app.command("set")
def set_command(
    field_name: str = typer.Argument(..., help="Field name (e.g., first_name, email, template)"),
    value: str = typer.Argument(..., help="New value"),
):
    """
    Set a scalar or presentation field.

    Examples:\n

        $ manage_resume.py set first_name Jane

        $ manage_resume.py set template classic
    """
    session, scheduler = _open_session()
    try:
        session.set_field(field_name, value)
    except InvalidFieldError as e:
        _fail(e)
    _save(scheduler)

    message = session.error_for(field_name)
    if message:
        typer.secho(f"Saved, but {field_name}: {message}", fg=typer.colors.YELLOW)
    else:
        typer.secho(f"✓ {field_name} updated", fg=typer.colors.GREEN)


@app.command("add")
def add_command(kind: str = typer.Argument(..., help="education, experience, projects, certifications or languages")):
    """Add an empty entry to a structured list."""
    session, scheduler = _open_session()
    try:
        session.add_entry(kind)
    except UnknownEntryKindError as e:
        _fail(e)
    _save(scheduler)
    typer.secho(f"✓ Added {kind} entry #{len(session.document.entries(kind)) - 1}", fg=typer.colors.GREEN)


@app.command("edit")
def edit_command(
    kind: str = typer.Argument(..., help="Entry list"),
    index: int = typer.Argument(..., help="Entry position (0-based)"),
    key: str = typer.Argument(..., help="Field of the entry (e.g., degree, role)"),
    value: str = typer.Argument(..., help="New value"),
):
    """Edit one field of an entry."""
    session, scheduler = _open_session()
    try:
        session.update_entry(kind, index, key, value)
    except ValueError as e:
        _fail(e)
    _save(scheduler)
    typer.secho(f"✓ {kind}[{index}].{key} updated", fg=typer.colors.GREEN)


@app.command("remove")
def remove_command(
    kind: str = typer.Argument(..., help="Entry list (including skills and hobbies)"),
    index: int = typer.Argument(..., help="Entry position (0-based)"),
):
    """Remove an entry."""
    session, scheduler = _open_session()
    try:
        session.remove_entry(kind, index)
    except UnknownEntryKindError as e:
        _fail(e)
    _save(scheduler)
    typer.secho(f"✓ Removed {kind}[{index}]", fg=typer.colors.GREEN)


@app.command("move")
def move_command(
    kind: str = typer.Argument(..., help="Entry list"),
    index: int = typer.Argument(..., help="Entry position (0-based)"),
    direction: str = typer.Argument(..., help="up or down"),
):
    """Move an entry one position up or down."""
    session, scheduler = _open_session()
    try:
        session.move_entry(kind, index, _direction(direction))
    except UnknownEntryKindError as e:
        _fail(e)
    _save(scheduler)
    typer.secho(f"✓ Moved {kind}[{index}] {direction}", fg=typer.colors.GREEN)


@app.command("skill")
def skill_command(value: str = typer.Argument(..., help="Skill to add")):
    """Add a skill (duplicates are ignored, regardless of case)."""
    session, scheduler = _open_session()
    if session.add_skill(value):
        _save(scheduler)
        typer.secho(f"✓ Added skill '{value.strip()}'", fg=typer.colors.GREEN)
    else:
        typer.echo(f"⊘ '{value}' is blank or already listed")


@app.command("hobby")
def hobby_command(value: str = typer.Argument(..., help="Hobby to add")):
    """Add a hobby (duplicates are ignored, regardless of case)."""
    session, scheduler = _open_session()
    if session.add_hobby(value):
        _save(scheduler)
        typer.secho(f"✓ Added hobby '{value.strip()}'", fg=typer.colors.GREEN)
    else:
        typer.echo(f"⊘ '{value}' is blank or already listed")


@app.command("section-move")
def section_move_command(
    section_id: str = typer.Argument(..., help="Section identifier"),
    direction: str = typer.Argument(..., help="up or down"),
):
    """Move a section one position up or down."""
    session, scheduler = _open_session()
    try:
        session.move_section(section_id, _direction(direction))
    except UnknownSectionError as e:
        _fail(e)
    _save(scheduler)
    typer.echo("Section order: " + " > ".join(session.section_order))


@app.command("section-hide")
def section_hide_command(section_id: str = typer.Argument(..., help="Section identifier")):
    """Hide a section from the composed resume."""
    session, scheduler = _open_session()
    try:
        session.set_section_visible(section_id, False)
    except UnknownSectionError as e:
        _fail(e)
    _save(scheduler)
    typer.secho(f"✓ {section_id} hidden", fg=typer.colors.GREEN)


@app.command("section-show")
def section_show_command(section_id: str = typer.Argument(..., help="Section identifier")):
    """Show a previously hidden section."""
    session, scheduler = _open_session()
    try:
        session.set_section_visible(section_id, True)
    except UnknownSectionError as e:
        _fail(e)
    _save(scheduler)
    typer.secho(f"✓ {section_id} visible", fg=typer.colors.GREEN)


@app.command("keywords")
def keywords_command(job_file: Path = typer.Argument(..., help="Text file with the job description")):
    """List job description keywords that do not appear in the resume."""
    if not job_file.exists():
        typer.secho(f"Error: {job_file} not found", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    session, _ = _open_session()
    analyzer = KeywordGapAnalyzer(job_file.read_text(encoding="utf-8")).attach(session)

    if not analyzer.missing_keywords:
        typer.secho("✓ No missing keywords", fg=typer.colors.GREEN)
        return

    typer.secho(f"{len(analyzer.missing_keywords)} missing keyword(s):", fg=typer.colors.BLUE, bold=True)
    typer.echo(", ".join(analyzer.missing_keywords))


@app.command("export")
def export_command(path: Path = typer.Argument(Path("resume-data.json"), help="Output file or directory")):
    """Export resume data as JSON."""
    session, _ = _open_session()
    written = export_to_file(session, path)
    typer.secho(f"✓ Exported to {written}", fg=typer.colors.GREEN)


@app.command("import")
def import_command(path: Path = typer.Argument(..., help="Previously exported JSON file")):
    """Import resume data; invalid files are ignored and leave the resume unchanged."""
    session, scheduler = _open_session()
    if import_from_file(session, path):
        _save(scheduler)
        typer.secho(f"✓ Imported {path}", fg=typer.colors.GREEN)
    else:
        typer.echo(f"⊘ {path} was not a valid resume data file; nothing changed")


@app.command("reset")
def reset_command(yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation")):
    """Discard the current resume and start over."""
    if not yes:
        typer.confirm("Discard the current resume?", abort=True)

    session, scheduler = _open_session()
    session.reset()
    _save(scheduler)
    typer.secho("✓ Resume reset", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()

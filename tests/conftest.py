"""Shared fixtures: isolate storage and settings from the developer's machine."""

import pytest

from cvwizard.contexts.authoring.document import ResumeDocument
from cvwizard.contexts.authoring.resume_components import EducationEntry, ExperienceEntry
from cvwizard.contexts.authoring.session import AuthoringSession
from cvwizard.utils.config import clear_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point storage at a temp dir and drop cached settings around each test."""
    monkeypatch.setenv("CVWIZARD_STORAGE_DIR", str(tmp_path / "storage"))
    monkeypatch.delenv("CVWIZARD_CONFIG_PATH", raising=False)
    monkeypatch.delenv("CVWIZARD_AUTOSAVE_DEBOUNCE", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def personal_details():
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "title": "Engineer",
        "email": "jane@doe.com",
        "phone": "123 456 7890",
    }


@pytest.fixture
def filled_session(personal_details):
    """Session with every wizard step complete."""
    session = AuthoringSession()
    for name, value in personal_details.items():
        session.set_field(name, value)
    session.set_field("summary", "Backend engineer building Python services.")
    session.add_entry("education")
    session.update_entry("education", 0, "degree", "BSc Computer Science")
    session.update_entry("education", 0, "institution", "TU Delft")
    session.update_entry("education", 0, "year", "2016-2020")
    session.add_entry("experience")
    session.update_entry("experience", 0, "role", "Software Engineer")
    session.update_entry("experience", 0, "company", "Acme")
    session.update_entry("experience", 0, "period", "2020-2024")
    session.update_entry("experience", 0, "description", "Built data pipelines\nMaintained APIs")
    session.add_skill("Python")
    session.add_skill("SQL")
    return session


@pytest.fixture
def sample_document():
    return ResumeDocument(
        first_name="Jane",
        last_name="Doe",
        summary="Python developer",
        education=(EducationEntry(institution="TU Delft", degree="MSc", year="2020"),),
        experience=(ExperienceEntry(role="Engineer", company="Acme", period="2021", description="APIs"),),
        skills=("Python", "Docker"),
        hobbies=("Chess",),
    )

"""Unit tests for snapshot serialization and merging."""

import pytest

from cvwizard.contexts.authoring.document import SECTION_IDS, Template
from cvwizard.contexts.authoring.session import AuthoringSession
from cvwizard.contexts.persistence.exceptions import SnapshotFormatError
from cvwizard.contexts.persistence.snapshot import (
    apply_snapshot,
    camel_case,
    deserialize_document,
    deserialize_state,
    from_json,
    serialize_session,
    to_json,
)

REVERSED_ORDER = list(reversed(SECTION_IDS))


@pytest.mark.unit
class TestSerialize:
    def test_top_level_shape(self, filled_session):
        snapshot = serialize_session(filled_session)
        assert set(snapshot) == {"document", "sectionOrder", "sectionVisibility"}
        assert snapshot["sectionOrder"] == list(SECTION_IDS)
        assert snapshot["sectionVisibility"]["skills"] is True

    def test_document_keys_are_camel_case(self, filled_session):
        document = serialize_session(filled_session)["document"]
        assert document["firstName"] == "Jane"
        assert document["countryCode"] == "+31"
        assert document["accentColor"] == "#1355a2"
        assert document["template"] == "professional"
        assert document["profileImage"] is None
        assert document["skills"] == ["Python", "SQL"]
        assert document["education"][0]["institution"] == "TU Delft"
        assert "id" in document["experience"][0]

    def test_camel_case(self):
        assert camel_case("first_name") == "firstName"
        assert camel_case("email") == "email"


@pytest.mark.unit
class TestRoundTrip:
    def test_session_round_trip(self, filled_session):
        filled_session.set_field("template", "classic")
        filled_session.set_section_order(REVERSED_ORDER)
        filled_session.set_section_visible("hobbies", False)

        restored = AuthoringSession()
        apply_snapshot(restored, from_json(to_json(serialize_session(filled_session))))

        assert restored.document == filled_session.document
        assert restored.section_order == filled_session.section_order
        assert restored.section_visibility == filled_session.section_visibility

    def test_entry_ids_survive(self, filled_session):
        restored = AuthoringSession()
        apply_snapshot(restored, serialize_session(filled_session))
        assert restored.document.experience[0].entry_id == filled_session.document.experience[0].entry_id


@pytest.mark.unit
class TestPartialMerge:
    def test_only_section_order(self, filled_session):
        document = filled_session.document
        apply_snapshot(filled_session, {"sectionOrder": REVERSED_ORDER})
        assert filled_session.section_order == tuple(REVERSED_ORDER)
        assert filled_session.document == document

    def test_only_document(self, filled_session):
        filled_session.set_section_order(REVERSED_ORDER)
        apply_snapshot(filled_session, {"document": {"firstName": "John"}})
        assert filled_session.document.first_name == "John"
        assert filled_session.document.skills == ()
        assert filled_session.section_order == tuple(REVERSED_ORDER)

    def test_missing_document_fields_use_defaults(self):
        document = deserialize_document({"lastName": "Doe"})
        assert document.template == Template.PROFESSIONAL
        assert document.country_code == "+31"

    def test_unknown_keys_ignored(self):
        document, order, visibility = deserialize_state({"document": {"nickname": "JD"}, "theme": "dark"})
        assert document.first_name == ""
        assert order is None and visibility is None

    def test_duplicate_skills_collapsed(self):
        document = deserialize_document({"skills": ["Python", "python", " SQL "]})
        assert document.skills == ("Python", "SQL")


@pytest.mark.unit
class TestMalformed:
    @pytest.mark.parametrize(
        "snapshot",
        [
            [],
            "text",
            {"document": []},
            {"document": {"firstName": 42}},
            {"document": {"education": "TU Delft"}},
            {"document": {"education": [["TU Delft"]]}},
            {"document": {"projects": [{"url": 5}]}},
            {"document": {"template": "fancy"}},
            {"document": {"accentColor": "red"}},
            {"sectionOrder": "education"},
            {"sectionOrder": ["education"]},
            {"sectionOrder": REVERSED_ORDER[1:] + ["education"]},
            {"sectionVisibility": {"awards": True}},
            {"sectionVisibility": {"skills": "yes"}},
        ],
    )
    def test_rejected(self, snapshot):
        with pytest.raises(SnapshotFormatError):
            deserialize_state(snapshot)

    def test_invalid_json(self):
        with pytest.raises(SnapshotFormatError, match="Invalid JSON"):
            from_json("{not json")

    def test_error_names_the_key(self):
        with pytest.raises(SnapshotFormatError) as exc_info:
            deserialize_state({"document": {"education": [{"degree": 1}]}})
        assert exc_info.value.key == "document.education[0].degree"

    def test_session_untouched_on_failure(self, filled_session):
        before = serialize_session(filled_session)
        with pytest.raises(SnapshotFormatError):
            apply_snapshot(filled_session, {"document": {"firstName": "John"}, "sectionOrder": ["skills"]})
        assert serialize_session(filled_session) == before

    def test_nullable_fields_accept_null(self):
        document = deserialize_document({"profileImage": None, "projects": [{"title": "X", "url": None}]})
        assert document.profile_image is None
        assert document.projects[0].url is None

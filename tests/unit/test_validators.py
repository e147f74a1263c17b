"""Unit tests for scalar field validators."""

import pytest

from cvwizard.contexts.authoring.validators import (
    EMAIL_MESSAGE,
    EMAIL_REQUIRED_MESSAGE,
    NAME_MESSAGE,
    PHONE_MESSAGE,
    PHONE_REQUIRED_MESSAGE,
    REQUIRED_MESSAGE,
    URL_MESSAGE,
    canonical_field_name,
    validate,
)


@pytest.mark.unit
class TestNameValidation:
    @pytest.mark.parametrize("value", ["Jane", "Mary Ann", "O'Neil", "Smith-Jones", "José"])
    def test_valid_names(self, value):
        assert validate("firstName", value) == ""
        assert validate("lastName", value) == ""

    @pytest.mark.parametrize("value", ["J4ne", "Jane!", "Doe_", "Jane@", "R2D2"])
    def test_digits_and_symbols_rejected(self, value):
        assert validate("firstName", value) == NAME_MESSAGE

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_is_required(self, value):
        assert validate("lastName", value) == REQUIRED_MESSAGE

    def test_snake_case_field_names(self):
        assert validate("first_name", "J4ne") == NAME_MESSAGE


@pytest.mark.unit
class TestEmailValidation:
    def test_valid_email(self):
        assert validate("email", "jane@doe.com") == ""
        assert validate("email", "jane.doe+cv@mail.example.org") == ""

    def test_missing_tld(self):
        assert validate("email", "jane@doe") == EMAIL_MESSAGE

    def test_missing_at(self):
        assert validate("email", "jane.doe.com") == EMAIL_MESSAGE

    def test_blank(self):
        assert validate("email", "") == EMAIL_REQUIRED_MESSAGE


@pytest.mark.unit
class TestPhoneValidation:
    def test_digits_spaces_hyphens(self):
        assert validate("phone", "123 456-7890") == ""

    @pytest.mark.parametrize("value", ["(123) 456", "+31 6 1234", "12a34"])
    def test_other_characters_rejected(self, value):
        assert validate("phone", value) == PHONE_MESSAGE

    def test_blank(self):
        assert validate("phone", " ") == PHONE_REQUIRED_MESSAGE


@pytest.mark.unit
class TestUrlValidation:
    def test_empty_is_fine(self):
        assert validate("linkedin", "") == ""
        assert validate("website", "") == ""

    @pytest.mark.parametrize("value", ["https://linkedin.com/in/jane", "http://jane.dev"])
    def test_valid_urls(self, value):
        assert validate("website", value) == ""

    @pytest.mark.parametrize(
        "value",
        ["linkedin.com/in/jane", "ftp://jane.dev", "https://localhost", "http://.", "https://a.b has spaces"],
    )
    def test_invalid_urls(self, value):
        assert validate("linkedin", value) == URL_MESSAGE


@pytest.mark.unit
def test_unvalidated_fields_always_pass():
    assert validate("title", "") == ""
    assert validate("summary", "!!!") == ""
    assert validate("countryCode", "+31") == ""


@pytest.mark.unit
def test_none_treated_as_empty():
    assert validate("email", None) == EMAIL_REQUIRED_MESSAGE


@pytest.mark.unit
def test_canonical_field_name():
    assert canonical_field_name("firstName") == "first_name"
    assert canonical_field_name("accentColor") == "accent_color"
    assert canonical_field_name("email") == "email"

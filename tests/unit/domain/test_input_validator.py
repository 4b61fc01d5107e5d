"""
Tests for profile field validation.
"""

from datetime import date

import pytest

from domain.exceptions import ValidationError
from domain.validators.input_validator import ValidatedProfile, validate_profile


class TestValidateProfile:

    def test_valid_profile(self):
        profile = validate_profile("alice01", "pw", "a@b.com", date(1990, 1, 1))

        assert isinstance(profile, ValidatedProfile)
        assert profile.username == "alice01"
        assert profile.birthday == date(1990, 1, 1)

    def test_username_exactly_min_length(self):
        assert validate_profile("abcde", "pw", "a@b.com").username == "abcde"

    @pytest.mark.parametrize("username", ["", "a", "abcd"])
    def test_username_too_short(self, username):
        with pytest.raises(ValidationError) as exc_info:
            validate_profile(username, "pw", "a@b.com")

        assert exc_info.value.errors == [
            {"field": "username", "msg": "Username must be at least 5 characters"}
        ]

    @pytest.mark.parametrize("username", ["alice_01", "alice 01", "alice-01", "alicé01", "alice01\n"])
    def test_username_not_alphanumeric(self, username):
        with pytest.raises(ValidationError) as exc_info:
            validate_profile(username, "pw", "a@b.com")

        assert exc_info.value.errors[0]["msg"] == (
            "Username contains non alphanumeric characters - not allowed"
        )

    def test_empty_password(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_profile("alice01", "", "a@b.com")

        assert exc_info.value.errors == [{"field": "password", "msg": "Password is required"}]

    @pytest.mark.parametrize("email", ["", "not-an-email", "a@", "@b.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValidationError) as exc_info:
            validate_profile("alice01", "pw", email)

        assert exc_info.value.errors == [
            {"field": "email", "msg": "Email does not appear to be valid"}
        ]

    def test_collects_every_failed_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_profile("ab", "", "nope")

        fields = [e["field"] for e in exc_info.value.errors]
        assert fields == ["username", "password", "email"]

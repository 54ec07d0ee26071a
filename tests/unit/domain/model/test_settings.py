"""Unit tests for settings, profile patches and body text."""

from datetime import datetime
from uuid import uuid4

import pytest
from pydantic import ValidationError

from soular.domain.model import (
    ProfilePatch,
    SettingsPatch,
    UserSettings,
    apply_settings_patch,
)
from soular.domain.value import BodyText, Language, Theme, UserId


def _settings() -> UserSettings:
    now = datetime(2025, 1, 1)
    return UserSettings(
        id="settings-1", user_id=UserId(uuid4()), created_at=now, updated_at=now
    )


class TestSettingsPatch:
    """Tests for SettingsPatch."""

    def test_defaults_match_new_account(self):
        settings = _settings()
        assert settings.theme == Theme.SYSTEM
        assert settings.language == Language.INDONESIAN
        assert settings.posts_per_page == 20
        assert settings.email_on_like is False

    def test_rejects_unknown_field(self):
        """Typos are caught before anything is sent."""
        with pytest.raises(ValidationError):
            SettingsPatch(theem="dark")

    @pytest.mark.parametrize(
        "field,value",
        [
            ("posts_per_page", 0),
            ("posts_per_page", 101),
            ("digest_day", 7),
            ("theme", "sepia"),
            ("language", "fr"),
            ("email_digest", "hourly"),
        ],
    )
    def test_rejects_out_of_range_values(self, field, value):
        with pytest.raises(ValidationError):
            SettingsPatch(**{field: value})

    def test_changes_contains_only_set_fields(self):
        patch = SettingsPatch(theme=Theme.DARK, email_on_like=True)
        assert patch.changes() == {"theme": "dark", "email_on_like": True}

    def test_false_is_a_change(self):
        patch = SettingsPatch(push_notifications=False)
        assert not patch.is_empty
        assert patch.changes() == {"push_notifications": False}

    def test_empty_patch(self):
        assert SettingsPatch().is_empty

    def test_apply_merges_and_keeps_other_fields(self):
        settings = _settings()
        merged = apply_settings_patch(
            settings, SettingsPatch(language=Language.ENGLISH, digest_day=3)
        )

        assert merged.language == Language.ENGLISH
        assert merged.digest_day == 3
        assert merged.theme == settings.theme
        assert merged.user_id == settings.user_id


class TestProfilePatch:
    """Tests for ProfilePatch."""

    def test_rejects_email_change(self):
        with pytest.raises(ValidationError):
            ProfilePatch(email="new@example.com")

    def test_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            ProfilePatch(name="")

    def test_rejects_long_bio(self):
        with pytest.raises(ValidationError):
            ProfilePatch(bio="x" * 501)

    def test_changes(self):
        assert ProfilePatch(bio="Suka film horor").changes() == {
            "bio": "Suka film horor"
        }


class TestBodyText:
    """Tests for BodyText."""

    def test_strips_whitespace(self):
        assert BodyText("  Keren banget  ").root == "Keren banget"

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_rejects_blank(self, text):
        with pytest.raises(ValidationError, match="Comment is required"):
            BodyText(text)

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError):
            BodyText("a" * 5001)

"""Unit tests for application settings."""

import pytest

from lounge.config import AuthSettings, CommentSettings, Settings
from lounge.util.error import ConfigurationError


class TestAuthSettings:
    """Tests for admin email matching."""

    def test_admin_email_matching_ignores_case_and_whitespace(self):
        auth = AuthSettings(admin_emails=["Admin@Example.com "])

        assert auth.is_admin_email("admin@example.com") is True
        assert auth.is_admin_email(" ADMIN@EXAMPLE.COM") is True

    def test_other_emails_are_not_admins(self):
        auth = AuthSettings(admin_emails=["admin@example.com"])

        assert auth.is_admin_email("user@example.com") is False
        assert auth.is_admin_email(None) is False
        assert auth.is_admin_email("") is False


class TestCommentSettings:
    """Tests for comment threading settings."""

    def test_defaults(self):
        settings = CommentSettings()

        assert settings.max_depth == 10
        assert settings.list_limit == 50
        assert settings.schema_shape == "auto"

    def test_max_depth_must_be_positive(self):
        with pytest.raises(ValueError):
            CommentSettings(max_depth=0)

    def test_unknown_shape_rejected(self):
        with pytest.raises(ValueError):
            CommentSettings(schema_shape="sideways")


class TestAssertDeployable:
    """Tests for Settings.assert_deployable."""

    def test_placeholder_secret_refused_in_production(self):
        settings = Settings(environment="production", auth=AuthSettings())

        with pytest.raises(ConfigurationError) as exc_info:
            settings.assert_deployable()
        assert exc_info.value.setting == "auth.jwt_secret"

    def test_real_secret_accepted_in_production(self):
        settings = Settings(
            environment="production", auth=AuthSettings(jwt_secret="s3cret-value")
        )

        settings.assert_deployable()

    def test_placeholder_secret_allowed_in_development(self):
        settings = Settings(environment="development", auth=AuthSettings())

        settings.assert_deployable()

    def test_production_uses_https(self):
        settings = Settings(environment="production", host="api.lounge.example")

        assert settings.api.base_url == "https://api.lounge.example"

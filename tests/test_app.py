"""Tests for Flask application startup and the health endpoint."""

import json
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from mortgage_planner import create_app
from mortgage_planner.config import reset_global_settings


class TestAppStartup:
    """Test cases for Flask application startup."""

    def test_app_creation_with_valid_config(self, app):
        """Test that app creates successfully with valid configuration."""
        assert app.config["SECRET_KEY"] == "test-secret-key-123"
        assert app.config["PROJECTION_YEARS"] == 30
        assert app.config["TESTING"] is True
        assert app.config["DEBUG"] is False

    def test_app_creation_fails_without_secret_key(self):
        """Test that app creation fails when SECRET_KEY is missing."""
        reset_global_settings()

        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                create_app()

        assert "SECRET_KEY" in str(exc_info.value)

    def test_app_uses_custom_environment_variables(self):
        """Test that app picks up projection and share settings from the environment."""
        reset_global_settings()

        with patch.dict(
            os.environ,
            {
                "SECRET_KEY": "custom-secret",
                "APP_ENV": "production",
                "PROJECTION_YEARS": "45",
                "SHARE_BASE_URL": "https://plan.example.com",
            },
            clear=True,
        ):
            app = create_app()

        assert app.config["SECRET_KEY"] == "custom-secret"
        assert app.config["PROJECTION_YEARS"] == 45
        assert app.config["SHARE_BASE_URL"] == "https://plan.example.com"
        assert app.config["DEBUG"] is False

    def test_config_name_overrides_app_env(self):
        """Test that an explicit config name wins over APP_ENV."""
        app = create_app("development")

        assert app.config["ENV"] == "development"
        assert app.config["DEBUG"] is True


def test_healthz_ok(client):
    """Test that the health endpoint returns 200 with correct JSON."""
    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.content_type == "application/json"

    data = json.loads(response.data)
    assert data == {"status": "ok", "service": "mortgage-planner"}

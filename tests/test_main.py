"""
Tests for the main application module.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from app.main import app, run
from app.services.weather_client import WeatherClient


class TestMainApplication:
    """Test suite for main FastAPI application configuration.

    Validates application setup, middleware configuration,
    router registration, and API documentation endpoints.
    """

    def test_app_creation(self):
        """Test FastAPI application initialization.

        Verifies that the application is created with correct
        metadata and documentation endpoints are properly configured.
        """
        assert app.title == "Weather Proxy API"
        assert app.version == "1.0.0"
        assert app.docs_url == "/docs"
        assert app.redoc_url == "/redoc"
        assert app.openapi_url == "/openapi.json"

    def test_cors_middleware_added(self):
        """Test CORS middleware integration."""
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in str(middleware_classes)

    def test_request_tracker_middleware_added(self):
        """Test request tracking middleware integration."""
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "RequestTrackerMiddleware" in str(middleware_classes)

    def test_routers_included(self):
        """Test API route registration."""
        paths = app.openapi()["paths"]

        assert "/api/weather" in paths
        assert "/api/forecast" in paths
        assert "/api/weather/coordinates" in paths
        assert "/api/forecast/coordinates" in paths
        assert "/api/health" in paths

    def test_prometheus_metrics_endpoint(self):
        """Test Prometheus metrics endpoint availability."""
        response = TestClient(app).get("/prometheus-metrics")

        assert response.status_code == 200


class TestLifespan:
    """Test suite for application startup and shutdown."""

    def test_startup_builds_weather_client(self, settings):
        with patch("app.main.settings", settings):
            with TestClient(app):
                assert isinstance(app.state.weather_client, WeatherClient)
                assert app.state.weather_client.settings is settings


class TestRun:
    """Test suite for the server entry point."""

    @pytest.mark.parametrize("port", [5000, 8123])
    def test_binds_configured_port(self, settings, port):
        """The configured port is used rather than a hardcoded one."""
        configured = settings.model_copy(update={"port": port, "host": "127.0.0.1"})

        with patch("app.main.settings", configured), patch("app.main.uvicorn.run") as uvicorn_run:
            run()

        uvicorn_run.assert_called_once()
        assert uvicorn_run.call_args.kwargs["port"] == port
        assert uvicorn_run.call_args.kwargs["host"] == "127.0.0.1"

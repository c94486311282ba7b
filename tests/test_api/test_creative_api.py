"""
Tests for the creative API

Tests for videobrain/api/routers/creative.py
"""

import pytest
from fastapi.testclient import TestClient

from videobrain.api.main import app
from videobrain.api.routers import creative
from videobrain.api.routers.creative import (
    ImageIntent,
    detect_image_type,
    detect_language,
    detect_product_type,
    get_completion_service,
    to_provided_image,
    validate_video_spec,
)
from videobrain.core.constants import ImageType, ProductType


@pytest.fixture
def completion_service(mock_completion_service, stage_responses):
    """Completion service returning the three valid stage outputs."""
    return mock_completion_service(*stage_responses)


@pytest.fixture
def client(completion_service):
    """Test client with the completion service overridden and no rate limit."""
    app.dependency_overrides[get_completion_service] = lambda: completion_service
    creative.limiter.enabled = False
    yield TestClient(app)
    app.dependency_overrides.clear()
    creative.limiter.enabled = True


BRIEF = {
    "message": "task manager for tech teams",
    "productType": "saas",
    "providedImages": [
        {
            "id": "img_dashboard",
            "url": "https://cdn.example.com/dashboard.png",
            "intent": "screenshot",
            "description": "Main dashboard",
        },
    ],
}


class TestCreateVideoPlan:
    """Tests for POST /api/creative."""

    def test_success(self, client, completion_service):
        """Test a full run returns the video spec and stage outputs."""
        response = client.post("/api/creative", json=BRIEF)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]["scenes"]) == 4
        assert body["data"]["blueprint"]["designPack"] == "clean_saas"
        assert body["data"]["concept"] == "Ship projects without the chaos"
        assert body["data"]["providedImages"][0]["url"] == "https://cdn.example.com/dashboard.png"
        assert body["validation"] == {"valid": True, "errors": []}
        assert body["pipeline"]["marketingStrategy"]["keyMessages"][0]["message"] == "Your team is drowning"
        assert body["pipeline"]["artDirection"]["designPack"] == "clean_saas"
        assert completion_service.complete.await_count == 3

    def test_missing_message(self, client, completion_service):
        """Test a request without a message is rejected before any call."""
        response = client.post("/api/creative", json={"productType": "saas"})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Missing message"}
        assert completion_service.complete.await_count == 0

    def test_blank_message(self, client):
        """Test a whitespace message counts as missing."""
        response = client.post("/api/creative", json={"message": "   "})

        assert response.status_code == 400

    def test_invalid_tone(self, client, completion_service):
        """Test an unknown tone is a request error."""
        response = client.post("/api/creative", json={**BRIEF, "tone": "grumpy"})

        assert response.status_code == 400
        assert "tone" in response.json()["error"]
        assert completion_service.complete.await_count == 0

    def test_stage_failure(self, client, mock_completion_service):
        """Test a stage failure maps to 502 with the stage and raw output."""
        prose = "Happy to help! This product sounds amazing."
        app.dependency_overrides[get_completion_service] = lambda: mock_completion_service(prose)

        response = client.post("/api/creative", json=BRIEF)

        assert response.status_code == 502
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Pipeline failed at stage: marketing"
        assert body["details"].startswith("Failed to parse JSON:")
        assert body["rawOutput"] == prose


class TestDetection:
    """Tests for request field detection."""

    @pytest.mark.parametrize("message,expected", [
        ("An AI copywriter for agencies", ProductType.AI_TOOL),
        ("A dashboard for plumbers", ProductType.SAAS),
        ("Une boutique de bijoux", ProductType.ECOMMERCE),
        ("Coaching for founders", ProductType.SERVICE),
        ("Accounting for plumbers", ProductType.B2B),
    ])
    def test_detect_product_type(self, message, expected):
        """Test keyword groups are checked in order."""
        assert detect_product_type(message) == expected

    def test_detect_product_type_is_substring_match(self):
        """Test keywords match inside longer words."""
        assert detect_product_type("Email newsletters") == ProductType.AI_TOOL

    def test_detect_french(self):
        """Test more than two French function words means French."""
        assert detect_language("un outil pour les équipes de développement") == "français"

    def test_detect_english(self):
        """Test English is the default."""
        assert detect_language("le CRM for teams") == "english"

    @pytest.mark.parametrize("intent,description,expected", [
        ("dashboard capture", None, ImageType.SCREENSHOT),
        ("hero", "Our logo in white", ImageType.LOGO),
        ("screenshot of the logo page", None, ImageType.SCREENSHOT),
        (None, "team photo", ImageType.PHOTO),
        ("something", "else", ImageType.UNKNOWN),
    ])
    def test_detect_image_type(self, intent, description, expected):
        """Test image types come from intent and description keywords."""
        image = ImageIntent(id="img", intent=intent, description=description)

        assert detect_image_type(image) == expected

    def test_to_provided_image(self):
        """Test the url becomes the opaque reference."""
        image = to_provided_image(ImageIntent(id="img_1", url="data:image/png;base64,AAA", intent="logo"))

        assert image.type == ImageType.LOGO
        assert image.reference == "data:image/png;base64,AAA"
        assert image.description == "logo"


class TestValidateVideoSpec:
    """Tests for the converted spec check."""

    def test_valid(self, video_spec_dict):
        """Test distinct consecutive layouts are valid."""
        assert validate_video_spec(video_spec_dict) == {"valid": True, "errors": []}

    def test_no_scenes(self):
        """Test an empty scene list is invalid."""
        assert validate_video_spec({"scenes": []}) == {"valid": False, "errors": ["No scenes provided"]}

    def test_duplicate_layout(self, video_spec_dict):
        """Test repeated layouts are reported with 1-based scene numbers."""
        video_spec_dict["scenes"][1]["layout"] = "FULLSCREEN_STATEMENT"

        result = validate_video_spec(video_spec_dict)

        assert result["errors"] == ["Consecutive duplicate layout at scene 2"]


class TestHealth:
    """Tests for the service endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "Videobrain API"

    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "healthy"}

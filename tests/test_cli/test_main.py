"""
Tests for the command line

Tests for videobrain/__main__.py
"""

import argparse
import json
from unittest.mock import patch

import pytest

from videobrain.__main__ import build_parser, main, parse_image
from videobrain.core.constants import ImageType
from videobrain.core.exceptions import PipelineError


class TestParseImage:
    """Tests for the --image argument type."""

    def test_with_description(self):
        image = parse_image("img_1:screenshot:Main dashboard: dark mode")

        assert image.id == "img_1"
        assert image.type == ImageType.SCREENSHOT
        assert image.description == "Main dashboard: dark mode"

    def test_without_description(self):
        assert parse_image("logo:logo").description is None

    @pytest.mark.parametrize("value", ["img_1", "img_1:poster", ":logo"])
    def test_invalid(self, value):
        """Test malformed values are argument errors."""
        with pytest.raises(argparse.ArgumentTypeError):
            parse_image(value)


class TestMain:
    """Tests for the subcommands."""

    def test_command_required(self):
        """Test a subcommand must be given."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_effects(self, capsys):
        """Test the effects command prints the selection as JSON."""
        assert main(["effects", "--tone", "tech", "--images"]) == 0

        selection = json.loads(capsys.readouterr().out)
        assert selection["hook"]["imageReveal"] == "REVEAL_3D_FLIP"

    def test_generate_success(self, capsys):
        """Test generate prints the pipeline output."""
        fake_output = type("Output", (), {"to_dict": lambda self: {"ok": True}})()

        async def run(request):
            assert request.product_type.value == "saas"
            assert request.provided_images[0].id == "img_1"
            return fake_output

        with patch("videobrain.pipelines.run_creative_pipeline", side_effect=run):
            code = main([
                "generate", "task manager", "--product-type", "saas",
                "--image", "img_1:screenshot", "--skip-validation",
            ])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {"ok": True}

    def test_generate_failure(self, capsys):
        """Test a stage failure prints the error and exits 1."""
        async def run(request):
            raise PipelineError("marketing", "Failed to parse JSON: hi...", raw_output="hi")

        with patch("videobrain.pipelines.run_creative_pipeline", side_effect=run):
            code = main(["generate", "task manager", "--skip-validation"])

        assert code == 1
        body = json.loads(capsys.readouterr().out)
        assert body["error"]["stage"] == "marketing"

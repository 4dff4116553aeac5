"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from diecast_scanner.cli import app

runner = CliRunner()


class TestParseCommand:

    def test_parse_inline_text(self, box_text):
        result = runner.invoke(app, ["parse", "--text", box_text])

        assert result.exit_code == 0
        assert "Hot Wheels" in result.output
        assert "Porsche" in result.output
        assert "HKC27" in result.output
        assert "1:64" in result.output

    def test_parse_json_output(self, box_text):
        result = runner.invoke(app, ["parse", "--json", "--text", box_text])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "brand": "Porsche",
            "model": "PORSCHE 911 GT3",
            "manufacturer": "Hot Wheels",
            "modelId": "HKC27",
            "scale": "1:64",
        }

    def test_parse_from_stdin(self):
        result = runner.invoke(app, ["parse", "--json"], input="MINIGT 1/64 NISSAN SKYLINE\n")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["manufacturer"] == "MINIGT"
        assert data["brand"] == "Nissan"
        assert data["scale"] == "1:64"

    def test_parse_from_file(self, tmp_path):
        path = tmp_path / "ocr.txt"
        path.write_text("GREENLIGHT\nHOLLYWOOD SERIES\n1:64", encoding="utf-8")

        result = runner.invoke(app, ["parse", "--json", str(path)])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["manufacturer"] == "Greenlight"
        assert data["model"] == "HOLLYWOOD SERIES"

    def test_parse_empty_stdin_gives_fallbacks(self):
        result = runner.invoke(app, ["parse", "--json"], input="")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["brand"] == "Unknown Manufacturer"
        assert data["model"] == "Unknown Model"
        assert data["modelId"] == ""

    def test_parse_flags_low_confidence(self):
        result = runner.invoke(app, ["parse", "--text", "RANDOM BLURRY TEXT"])

        assert result.exit_code == 0
        assert "review before saving" in result.output

    def test_parse_missing_file(self, tmp_path):
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.txt")])

        assert result.exit_code == 1
        assert "Could not read" in result.output


class TestMatchCommand:

    def test_match_found(self, collection_file, box_text):
        result = runner.invoke(app, ["match", "--collection", str(collection_file), "--text", box_text])

        assert result.exit_code == 0
        assert "Already in collection" in result.output

    def test_match_not_found(self, collection_file):
        result = runner.invoke(
            app, ["match", "--collection", str(collection_file), "--text", "RANDOM BLURRY TEXT"]
        )

        assert result.exit_code == 0
        assert "No match in collection" in result.output

    def test_match_uses_configured_collection(self, collection_file, box_text):
        with patch("diecast_scanner.cli.settings") as mock_settings:
            mock_settings.COLLECTION_PATH = str(collection_file)

            result = runner.invoke(app, ["match", "--text", box_text])

        assert result.exit_code == 0
        assert "Already in collection" in result.output

    def test_match_without_collection(self, box_text):
        with patch("diecast_scanner.cli.settings") as mock_settings:
            mock_settings.COLLECTION_PATH = None

            result = runner.invoke(app, ["match", "--text", box_text])

        assert result.exit_code == 1
        assert "No collection given" in result.output

    def test_match_missing_collection_file(self, tmp_path, box_text):
        result = runner.invoke(
            app, ["match", "--collection", str(tmp_path / "missing.json"), "--text", box_text]
        )

        assert result.exit_code == 1
        assert "Collection file not found" in result.output

    def test_match_malformed_collection(self, tmp_path, box_text):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"cars": [{"brand": "Ford"}]}), encoding="utf-8")

        result = runner.invoke(app, ["match", "--collection", str(path), "--text", box_text])

        assert result.exit_code == 1
        assert "missing required fields" in result.output

    @pytest.mark.parametrize("threshold", ["-1", "1.5"])
    def test_match_invalid_threshold(self, collection_file, box_text, threshold):
        result = runner.invoke(
            app,
            ["match", "--collection", str(collection_file), "--threshold", threshold, "--text", box_text],
        )

        assert result.exit_code == 1


class TestSearchCommand:

    def test_search_results(self, collection_file):
        result = runner.invoke(app, ["search", "skyline", "--collection", str(collection_file)])

        assert result.exit_code == 0
        assert "Skyline" in result.output
        assert "Ferrari" not in result.output

    def test_search_no_results(self, collection_file):
        result = runner.invoke(app, ["search", "lamborghini countach", "--collection", str(collection_file)])

        assert result.exit_code == 0
        assert "No cars match" in result.output


class TestCLIIntegration:
    """Parse a box, draft an entry and find it again."""

    def test_parse_then_match_integration(self, tmp_path, box_text):
        from diecast_scanner.ocr.extract import parse_ocr_text
        from diecast_scanner.store.collection import draft_from_parsed

        draft = draft_from_parsed(parse_ocr_text(box_text))
        draft.id = "new-1"
        path = tmp_path / "collection.json"
        path.write_text(json.dumps({"cars": [draft.to_dict()]}), encoding="utf-8")

        result = runner.invoke(app, ["match", "--collection", str(path), "--text", box_text])

        assert result.exit_code == 0
        assert "Already in collection" in result.output


if __name__ == "__main__":
    pytest.main([__file__])

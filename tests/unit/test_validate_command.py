"""Unit tests for ValidateCommand"""

import pytest

from ccicheck.commands.validate import ValidateCommand
from ccicheck.exceptions import InputValidationError, ManifestLoadError
from ccicheck.models.inputs import DeployInputs
from ccicheck.utils.sinks import CollectingSink


class TestValidateCommand:
    """Test the action check sequence"""

    def test_all_checks_pass(self, valid_input_values):
        report = ValidateCommand(DeployInputs(**valid_input_values), info=CollectingSink()).execute()

        assert report.passed
        assert [r.name for r in report.results] == [
            "credentials", "project_id", "region", "namespace",
            "deployment", "manifest", "consistency", "image",
        ]

    def test_optional_inputs_skip_checks(self, valid_input_values):
        """Test consistency and image checks only run when their inputs are given"""
        valid_input_values.update(manifest="", image="")

        report = ValidateCommand(DeployInputs(**valid_input_values), info=CollectingSink()).execute()

        assert [r.name for r in report.results] == [
            "credentials", "project_id", "region", "namespace", "deployment", "manifest",
        ]

    def test_failures_collected(self, valid_input_values):
        valid_input_values.update(access_key="short", namespace="-bad")

        with pytest.raises(InputValidationError) as exc_info:
            ValidateCommand(DeployInputs(**valid_input_values), info=CollectingSink()).execute()

        error = exc_info.value
        assert [name for name, _ in error.failures] == ["credentials", "namespace"]
        assert error.report.get("region").passed
        assert "Supported regions" not in error.help_text

    def test_region_failure_lists_supported_regions(self, valid_input_values):
        valid_input_values.update(region="eu-west-0")

        with pytest.raises(InputValidationError) as exc_info:
            ValidateCommand(DeployInputs(**valid_input_values), info=CollectingSink()).execute()

        assert "cn-north-4" in exc_info.value.help_text
        # the SWR image no longer matches the region either
        assert [name for name, _ in exc_info.value.failures] == ["region", "image"]

    def test_invalid_manifest_skips_consistency(self, valid_input_values, tmp_path):
        valid_input_values.update(manifest=str(tmp_path / "missing.yaml"))
        sink = CollectingSink()

        with pytest.raises(InputValidationError) as exc_info:
            ValidateCommand(DeployInputs(**valid_input_values), info=sink).execute()

        report = exc_info.value.report
        assert report.get("consistency") is None
        assert report.get("manifest").diagnostics == ["Manifest file does not exist."]
        assert sink.messages == ["Manifest file does not exist."]

    def test_inconsistent_manifest(self, valid_input_values, write_manifest):
        valid_input_values.update(manifest=write_manifest(name="other.yaml", deployment="other-app"))

        with pytest.raises(InputValidationError) as exc_info:
            ValidateCommand(DeployInputs(**valid_input_values), info=CollectingSink()).execute()

        result = exc_info.value.report.get("consistency")
        assert not result.passed
        assert result.message == "deployment is not consistent with manifest."
        assert result.diagnostics == ["deployment, manifest parameters must be the same."]

    def test_malformed_manifest_propagates(self, valid_input_values, write_manifest):
        valid_input_values.update(manifest=write_manifest(name="broken.yaml", content="a: b: c\n"))

        with pytest.raises(ManifestLoadError):
            ValidateCommand(DeployInputs(**valid_input_values), info=CollectingSink()).execute()

    def test_on_result_called_per_check(self, valid_input_values):
        seen = []

        ValidateCommand(
            DeployInputs(**valid_input_values),
            info=CollectingSink(),
            on_result=lambda result: seen.append((result.name, result.passed))
        ).execute()

        assert len(seen) == 8
        assert all(passed for _, passed in seen)

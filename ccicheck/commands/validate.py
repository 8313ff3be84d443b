"""Validate command implementation"""

import logging
from typing import Callable, Optional

from ccicheck.exceptions import InputValidationError
from ccicheck.models.inputs import DeployInputs
from ccicheck.models.result import CheckResult, ValidationReport
from ccicheck.utils.sinks import CollectingSink, InfoSink, log_sink
from ccicheck.validation import (
    SUPPORTED_REGIONS,
    check_ak_sk,
    check_deployment,
    check_image,
    check_manifest,
    check_namespace,
    check_project_id,
    check_region,
    is_deployment_name_consistent,
)

logger = logging.getLogger(__name__)


class ValidateCommand:
    """Run every input check of the deployment action, in action order"""

    def __init__(
        self,
        inputs: DeployInputs,
        info: Optional[InfoSink] = None,
        on_result: Optional[Callable[[CheckResult], None]] = None
    ):
        """Initialize validate command

        Args:
            inputs: Action inputs to check
            info: Sink receiving rejection diagnostics (defaults to logging)
            on_result: Called with each CheckResult as soon as it is known
        """
        self.inputs = inputs
        self.sink = CollectingSink(forward=info if info is not None else log_sink(logger))
        self.on_result = on_result

    def _record(self, report: ValidationReport, name: str, passed: bool, message: str):
        result = CheckResult(
            name=name,
            passed=passed,
            message=None if passed else message,
            diagnostics=list(self.sink.messages),
        )
        self.sink.clear()
        report.add(result)
        if self.on_result:
            self.on_result(result)

    def execute(self) -> ValidationReport:
        """Execute all checks

        Returns:
            Report with one result per check that ran

        Raises:
            InputValidationError: If any check failed
            ManifestLoadError: If the manifest could not be read or parsed
        """
        inputs = self.inputs
        report = ValidationReport()

        self._record(
            report, "credentials",
            check_ak_sk(inputs.access_key.get_secret_value(), inputs.secret_key.get_secret_value()),
            "access_key or secret_key is not correct."
        )
        self._record(report, "project_id", check_project_id(inputs.project_id), "project_id is not correct.")
        self._record(report, "region", check_region(inputs.region), "region is not supported.")
        self._record(report, "namespace", check_namespace(inputs.namespace), "namespace is not correct.")
        self._record(report, "deployment", check_deployment(inputs.deployment), "deployment is not correct.")

        manifest_ok = check_manifest(inputs.manifest, info=self.sink)
        self._record(report, "manifest", manifest_ok, "manifest is not correct.")

        # Without a manifest there is nothing to compare the deployment with
        if inputs.manifest and manifest_ok:
            self._record(
                report, "consistency",
                is_deployment_name_consistent(inputs.deployment, inputs.manifest, info=self.sink),
                "deployment is not consistent with manifest."
            )

        if inputs.image:
            self._record(
                report, "image",
                check_image(inputs.image, inputs.region, info=self.sink),
                "image is not correct."
            )

        if not report.passed:
            region_failed = not report.get("region").passed
            raise InputValidationError(
                report.failures,
                report=report,
                supported_regions=sorted(SUPPORTED_REGIONS) if region_failed else None
            )

        logger.debug("All %d input checks passed", len(report.results))
        return report

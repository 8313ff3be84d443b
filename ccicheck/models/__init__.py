"""Data models"""

from ccicheck.models.inputs import DeployInputs, INPUT_ENV_VARS
from ccicheck.models.result import CheckResult, ValidationReport

__all__ = ["DeployInputs", "INPUT_ENV_VARS", "CheckResult", "ValidationReport"]

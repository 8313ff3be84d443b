"""ccicheck Exception Classes

Base exception hierarchy for the CCI deployment input checks.
All custom exceptions include help_text for actionable user guidance.

Rejected inputs are reported by the predicates as ``False``; the exceptions
below are reserved for faults and for the aggregated command failure.
"""

from typing import List, Optional, Tuple


class CCICheckError(Exception):
    """Base exception for all ccicheck errors

    Attributes:
        message: Human-readable error description
        help_text: Optional actionable guidance for resolving the error
    """

    def __init__(self, message: str, help_text: str = None):
        """Initialize error with message and optional help text

        Args:
            message: Error description
            help_text: Optional remediation guidance
        """
        self.message = message
        self.help_text = help_text
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message with help text if available"""
        if self.help_text:
            return f"{self.message}\n\nHelp: {self.help_text}"
        return self.message


class ManifestLoadError(CCICheckError):
    """Raised when the manifest cannot be read or parsed

    This is a fault, not a rejection: the deployment action must stop
    instead of reporting a failed check.
    """

    def __init__(self, path: str, reason: str):
        """Initialize manifest load error

        Args:
            path: Manifest path as given by the caller
            reason: Underlying read or parse failure
        """
        message = f"Could not load manifest '{path}': {reason}"
        help_text = "Make sure the manifest is a readable UTF-8 YAML document"

        super().__init__(message, help_text)
        self.path = path
        self.reason = reason


class InputsFileError(CCICheckError):
    """Raised when an inputs file cannot be loaded"""

    def __init__(self, path: str, reason: str):
        message = f"Invalid inputs file '{path}': {reason}"
        help_text = (
            "The inputs file must be a YAML mapping, for example:\n"
            "  access_key: ...\n"
            "  region: cn-north-4\n"
            "  deployment: my-app"
        )

        super().__init__(message, help_text)
        self.path = path
        self.reason = reason


class InputValidationError(CCICheckError):
    """Raised when one or more deployment inputs were rejected

    Attributes:
        failures: (check name, message) pairs for every failed check
        report: Full report of the run, when available
    """

    def __init__(
        self,
        failures: List[Tuple[str, str]],
        report: Optional[object] = None,
        supported_regions: Optional[List[str]] = None
    ):
        """Initialize input validation error

        Args:
            failures: (check name, message) pairs for every failed check
            report: ValidationReport produced by the run
            supported_regions: Regions to suggest when the region check failed
        """
        count = len(failures)
        message = f"{count} input check{'s' if count != 1 else ''} failed: " + ", ".join(
            name for name, _ in failures
        )

        help_text = "\n".join(f"  - {text}" for _, text in failures)

        if supported_regions:
            help_text += "\n\nSupported regions:\n"
            help_text += "\n".join(f"  - {region}" for region in supported_regions)

        super().__init__(message, help_text)
        self.failures = failures
        self.report = report

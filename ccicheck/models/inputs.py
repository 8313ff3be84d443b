"""Deployment action inputs model.

Formats are not enforced here: any string is accepted so that every value
reaches the validators and bad inputs are reported as failed checks.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator

from ccicheck.exceptions import InputsFileError

# Input name -> environment variable set by the Actions runner
INPUT_ENV_VARS = {
    "access_key": "INPUT_ACCESS_KEY",
    "secret_key": "INPUT_SECRET_KEY",
    "project_id": "INPUT_PROJECT_ID",
    "region": "INPUT_REGION",
    "namespace": "INPUT_NAMESPACE",
    "deployment": "INPUT_DEPLOYMENT",
    "manifest": "INPUT_MANIFEST",
    "image": "INPUT_IMAGE",
}


class DeployInputs(BaseModel):
    """Inputs of a CCI deployment action."""

    access_key: SecretStr = Field(default=SecretStr(""), description="Huawei Cloud access key (AK)")
    secret_key: SecretStr = Field(default=SecretStr(""), description="Huawei Cloud secret key (SK)")
    project_id: str = Field(default="", description="Project ID of the region")
    region: str = Field(default="", description="CCI region, e.g. cn-north-4")
    namespace: str = Field(default="", description="CCI namespace")
    deployment: str = Field(default="", description="Deployment name")
    manifest: str = Field(default="", description="Path to the deployment manifest (optional)")
    image: str = Field(default="", description="Image to deploy (optional)")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @field_validator("*", mode="before")
    @classmethod
    def normalize_value(cls, v: Any) -> Any:
        """Treat null as empty and strip surrounding whitespace."""
        if v is None:
            return ""
        if isinstance(v, SecretStr):
            return SecretStr(v.get_secret_value().strip())
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            return v.strip()
        return v

    @classmethod
    def from_yaml(cls, path: Path) -> "DeployInputs":
        """Load inputs from a YAML mapping.

        Keys may be written as ``access-key`` or ``access_key``.

        Raises:
            InputsFileError: If the file is missing, unreadable or not a mapping
        """
        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise InputsFileError(str(path), str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InputsFileError(str(path), f"expected a mapping, got {type(data).__name__}")

        try:
            return cls(**normalize_keys(data))
        except ValidationError as e:
            raise InputsFileError(str(path), str(e)) from e

    def merged(self, overrides: Mapping[str, Optional[str]]) -> "DeployInputs":
        """Return a copy with every non-None override applied."""
        values = self.plain_values()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return DeployInputs(**values)

    def plain_values(self) -> Dict[str, str]:
        """All inputs as plain strings (secrets revealed)."""
        return {
            "access_key": self.access_key.get_secret_value(),
            "secret_key": self.secret_key.get_secret_value(),
            "project_id": self.project_id,
            "region": self.region,
            "namespace": self.namespace,
            "deployment": self.deployment,
            "manifest": self.manifest,
            "image": self.image,
        }


def normalize_keys(data: Dict[str, Any]) -> Dict[str, Any]:
    """Map ``access-key`` style keys to field names."""
    return {str(key).replace("-", "_"): value for key, value in data.items()}

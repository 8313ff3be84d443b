"""Input validators for CCI deployments"""

from ccicheck.validation.fields import (
    check_ak_sk,
    check_deployment,
    check_image,
    check_namespace,
    check_project_id,
    check_region,
)
from ccicheck.validation.manifest import (
    check_manifest,
    detect_content_type,
    is_deployment_name_consistent,
    load_manifest,
)
from ccicheck.validation.patterns import SUPPORTED_REGIONS

__all__ = [
    "SUPPORTED_REGIONS",
    "check_ak_sk",
    "check_deployment",
    "check_image",
    "check_manifest",
    "check_namespace",
    "check_project_id",
    "check_region",
    "detect_content_type",
    "is_deployment_name_consistent",
    "load_manifest",
]

"""Validators for single string inputs of the CCI deployment action.

Every function returns a definite bool for any input and never raises.
"""

import logging
import re
from typing import Any

from ccicheck.utils.sinks import InfoSink
from ccicheck.validation.patterns import (
    ACCESS_KEY_PATTERN,
    DEPLOYMENT_PATTERN,
    FORBIDDEN_DEPLOYMENT_CONNECTORS,
    NAMESPACE_PATTERN,
    ONE_CHAR_NAME_PATTERN,
    PROJECT_ID_PATTERN,
    SECRET_KEY_PATTERN,
    SUPPORTED_REGIONS,
    SWR_HOST_PATTERN,
    SWR_PREFIX,
)

logger = logging.getLogger(__name__)


def _fullmatch(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def check_ak_sk(access_key: str, secret_key: str) -> bool:
    """Check the access key / secret key pair format."""
    return _fullmatch(ACCESS_KEY_PATTERN, access_key) and _fullmatch(SECRET_KEY_PATTERN, secret_key)


def check_project_id(project_id: str) -> bool:
    """Check the project id format."""
    return _fullmatch(PROJECT_ID_PATTERN, project_id)


def check_region(region: str) -> bool:
    """Check that CCI is available in ``region`` (exact match)."""
    return isinstance(region, str) and region in SUPPORTED_REGIONS


def check_namespace(namespace: str) -> bool:
    """Check a namespace name: lowercase alphanumerics and hyphens, 1-63 chars."""
    return _fullmatch(NAMESPACE_PATTERN, namespace) or _fullmatch(ONE_CHAR_NAME_PATTERN, namespace)


def check_deployment(deployment: str) -> bool:
    """Check a deployment name.

    Same shape as a namespace but periods are allowed too, as long as no
    period sits next to another period or a hyphen.
    """
    if not isinstance(deployment, str):
        return False
    if any(connector in deployment for connector in FORBIDDEN_DEPLOYMENT_CONNECTORS):
        return False
    return _fullmatch(DEPLOYMENT_PATTERN, deployment) or _fullmatch(ONE_CHAR_NAME_PATTERN, deployment)


def check_image(image: str, region: str, *, info: InfoSink = None) -> bool:
    """Check an image reference against the deployment region.

    Only SWR images are checked: the registry host must look like
    ``swr.<region>.myhuaweicloud.com`` and must be in the same region as
    the CCI deployment. Images from any other registry are accepted.

    Args:
        image: Image reference, e.g. ``swr.cn-north-4.myhuaweicloud.com/ns/app:1.0``
        region: CCI region of the deployment
        info: Sink receiving the rejection reason

    Returns:
        True if the image may be deployed to ``region``
    """
    if info is None:
        info = logger.info

    if not isinstance(image, str) or not isinstance(region, str):
        return False
    if not image.startswith(SWR_PREFIX):
        return True
    if SWR_HOST_PATTERN.search(image) is None:
        return False
    if region not in image:
        info("The region of cci and swr must be the same.")
        return False
    return True

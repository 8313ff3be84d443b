"""Patterns and limits shared by the input validators.

Built once at import time and never mutated.
"""

import re

# Regions where CCI is available:
#   cn-north-4      CN North-Beijing4
#   cn-east-2       CN East-Shanghai2
#   cn-east-3       CN East-Shanghai1
#   cn-south-1      CN South-Guangzhou
#   af-south-1      AF-Johannesburg
#   ap-southeast-3  AP-Singapore
SUPPORTED_REGIONS = frozenset({
    "cn-north-4",
    "cn-east-2",
    "cn-east-3",
    "cn-south-1",
    "af-south-1",
    "ap-southeast-3",
})

ACCESS_KEY_PATTERN = re.compile(r"[a-zA-Z0-9]{10,30}")
SECRET_KEY_PATTERN = re.compile(r"[a-zA-Z0-9]{30,50}")

PROJECT_ID_PATTERN = re.compile(r"[a-zA-Z0-9]{16,64}")

# DNS-1123 label style names, matched with fullmatch
ONE_CHAR_NAME_PATTERN = re.compile(r"[a-z0-9]")
NAMESPACE_PATTERN = re.compile(r"[a-z0-9][a-z0-9-]{0,61}[a-z0-9]")
DEPLOYMENT_PATTERN = re.compile(r"[a-z0-9][a-z0-9.-]{0,61}[a-z0-9]")

# Dots and hyphens may not touch each other
FORBIDDEN_DEPLOYMENT_CONNECTORS = ("..", ".-", "-.")

SWR_PREFIX = "swr"
SWR_HOST_PATTERN = re.compile(r"swr\..{5,20}\.myhuaweicloud\.com")

YAML_CONTENT_TYPE = "text/yaml"
YAML_EXTENSIONS = (".yaml", ".yml")

MAX_MANIFEST_SIZE = 20 * 1024

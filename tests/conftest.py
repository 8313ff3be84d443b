"""Shared fixtures for ccicheck tests"""

import pytest

VALID_ACCESS_KEY = "ABCDEFGHIJ1234567890"
VALID_SECRET_KEY = "abcdefghij" * 4
VALID_PROJECT_ID = "0123456789abcdef0123456789abcdef"
VALID_IMAGE = "swr.cn-north-4.myhuaweicloud.com/team-a/web:1.0"

MANIFEST_TEMPLATE = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: {name}
  namespace: team-a
spec:
  replicas: 1
  template:
    spec:
      containers:
        - name: web
          image: swr.cn-north-4.myhuaweicloud.com/team-a/web:1.0
"""


@pytest.fixture
def write_manifest(tmp_path):
    """Factory writing a manifest file under tmp_path and returning its path as str"""
    def _write(content: str = None, name: str = "deployment.yaml", deployment: str = "web-app") -> str:
        path = tmp_path / name
        if content is None:
            content = MANIFEST_TEMPLATE.format(name=deployment)
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def valid_input_values(write_manifest):
    """Plain input values that pass every check"""
    return {
        "access_key": VALID_ACCESS_KEY,
        "secret_key": VALID_SECRET_KEY,
        "project_id": VALID_PROJECT_ID,
        "region": "cn-north-4",
        "namespace": "team-a",
        "deployment": "web-app",
        "manifest": write_manifest(),
        "image": VALID_IMAGE,
    }

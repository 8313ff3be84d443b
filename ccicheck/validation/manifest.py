"""Manifest file validators.

``check_manifest`` looks at the file itself (existence, type, size) and
``is_deployment_name_consistent`` compares its ``metadata.name`` with the
deployment input.
"""

import logging
import mimetypes
import stat
from pathlib import Path
from typing import Any, Optional

import yaml

from ccicheck.exceptions import ManifestLoadError
from ccicheck.utils.sinks import InfoSink
from ccicheck.validation.patterns import MAX_MANIFEST_SIZE, YAML_CONTENT_TYPE, YAML_EXTENSIONS

logger = logging.getLogger(__name__)

# Private registry so the result does not depend on the host's mime.types
_mime_types = mimetypes.MimeTypes()
for _extension in YAML_EXTENSIONS:
    _mime_types.add_type(YAML_CONTENT_TYPE, _extension)


def detect_content_type(path) -> Optional[str]:
    """Guess the MIME type of ``path`` from its file name.

    Compressed files (``.yaml.gz``) are reported as unknown.
    """
    content_type, encoding = _mime_types.guess_type(str(path))
    if encoding is not None:
        return None
    return content_type


def check_manifest(manifest: str, *, info: InfoSink = None) -> bool:
    """Check the manifest file given to the action.

    An empty path means no manifest was provided and is accepted. Otherwise
    the file must exist, must not be a directory, must be a yaml/yml file
    and must hold between 1 byte and 20KB.

    Args:
        manifest: Path to the manifest, relative to the working directory
        info: Sink receiving the rejection reason

    Returns:
        True if the manifest may be used
    """
    if info is None:
        info = logger.info

    if not manifest:
        return True
    if not isinstance(manifest, str):
        return False

    try:
        manifest_path = Path(manifest).absolute()
        manifest_stat = manifest_path.stat()
    except (OSError, ValueError):
        # missing, unreachable or malformed paths (too long, NUL byte)
        info("Manifest file does not exist.")
        return False

    if stat.S_ISDIR(manifest_stat.st_mode):
        info("Manifest file can not be a directory.")
        return False

    if detect_content_type(manifest_path) != YAML_CONTENT_TYPE:
        info("Manifest file must be yaml/yml file.")
        return False

    size = manifest_stat.st_size
    if size <= 0 or size > MAX_MANIFEST_SIZE:
        info("The file cannot be larger than 20KB.")
        return False

    return True


def load_manifest(manifest: str) -> Any:
    """Read and parse a manifest.

    Raises:
        ManifestLoadError: If the file cannot be read or is not valid YAML
    """
    try:
        content = Path(manifest).read_text(encoding="utf-8")
        return yaml.safe_load(content)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ManifestLoadError(manifest, str(e)) from e


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or value == {}


def is_deployment_name_consistent(deployment: str, manifest: str, *, info: InfoSink = None) -> bool:
    """Check that the manifest describes the deployment being updated.

    Only call this with a manifest that passed ``check_manifest`` and is not
    empty.

    Args:
        deployment: Deployment name input
        manifest: Path to the manifest
        info: Sink receiving the rejection reason

    Returns:
        True if ``metadata.name`` in the manifest equals ``deployment``

    Raises:
        ManifestLoadError: If the file cannot be read or parsed
    """
    if info is None:
        info = logger.info

    document = load_manifest(manifest)

    metadata = document.get("metadata") if isinstance(document, dict) else None
    if _is_blank(metadata) or not isinstance(metadata, dict):
        info("manifest file is not correct.")
        return False

    name = metadata.get("name")
    if _is_blank(name):
        info("manifest file is not correct.")
        return False

    if deployment != str(name):
        info("deployment, manifest parameters must be the same.")
        return False

    return True

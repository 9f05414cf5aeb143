"""Load and validate the runtime API document.

Reads spec/runtime-api.json and checks application, stage and version.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import UnknownFormatError, UnsupportedVersionError

logger = logging.getLogger(__name__)

DOCS_PATH = Path(__file__).parent.parent / "spec" / "runtime-api.json"

EXPECTED_APPLICATION = "factorio"
EXPECTED_STAGE = "runtime"
SUPPORTED_API_VERSION = 1

# Lists the rest of the generator iterates; absent ones are treated as empty
_LIST_SECTIONS = ("classes", "events", "concepts", "builtin_types", "global_objects", "defines")


def validate_docs(docs: dict[str, Any]) -> dict[str, Any]:
    """Check the document identity and version, returning it unchanged."""
    application = docs.get("application")
    stage = docs.get("stage")
    if application != EXPECTED_APPLICATION or stage != EXPECTED_STAGE:
        raise UnknownFormatError(application, stage)

    version = docs.get("api_version")
    # bool is an int subclass; True must not pass as version 1
    if isinstance(version, bool) or version != SUPPORTED_API_VERSION:
        raise UnsupportedVersionError(version)

    for section in _LIST_SECTIONS:
        docs.setdefault(section, [])

    logger.debug(
        "Validated %s %s api_version %s (%d classes, %d events, %d concepts)",
        application, stage, version,
        len(docs["classes"]), len(docs["events"]), len(docs["concepts"]),
    )
    return docs


def parse_docs(text: str) -> dict[str, Any]:
    """Parse a JSON string and validate it."""
    return validate_docs(json.loads(text))


def load_docs(path: Path | None = None) -> dict[str, Any]:
    """Load the runtime API document from disk."""
    docs_file = path or DOCS_PATH
    with open(docs_file, encoding="utf-8") as f:
        return validate_docs(json.load(f))

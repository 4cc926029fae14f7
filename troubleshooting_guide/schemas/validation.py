"""
Schemas - Document Validation

Turns caller-supplied JSON into domain objects, or fails with a message that
names the missing or malformed field. Nothing in here touches storage, so a
rejected document can never leave partial state behind.
"""

import json
import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from ..domain.models import DecisionTree, Device
from .documents import DecisionTreeDocument, DeviceDocument

logger = logging.getLogger(__name__)

DEVICE_REQUIRED_FIELDS = ("name", "model", "core_device", "brand_name")


class TreeValidationError(ValueError):
    """Raised when a decision tree document is rejected."""
    pass


class DeviceValidationError(ValueError):
    """Raised when a device document is rejected."""
    pass


def validate_tree_document(
    data: Union[str, bytes, dict, Any], device_id: Optional[str] = None
) -> DecisionTree:
    """
    Validates a decision tree document and builds the DecisionTree.

    Args:
        data: Parsed JSON (a dict) or the raw JSON text.
        device_id: Device the tree is imported for. Overrides any deviceId
            carried by the document.

    Raises:
        TreeValidationError: with a message naming the offending field.
    """
    if isinstance(data, (str, bytes)):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise TreeValidationError(f"Invalid JSON file: {e.msg}.") from e
        except UnicodeDecodeError as e:
            raise TreeValidationError(f"Invalid JSON file: {e.reason}.") from e

    if not isinstance(data, dict):
        raise TreeValidationError("Invalid decision tree format. Expected a JSON object.")

    if not data.get("rootNodeId") or data.get("nodes") is None:
        raise TreeValidationError(
            'Invalid decision tree format. Must contain "rootNodeId" and "nodes" properties.'
        )
    if not isinstance(data["rootNodeId"], str):
        raise TreeValidationError('Invalid decision tree format. "rootNodeId" must be a string.')
    if not isinstance(data["nodes"], dict):
        raise TreeValidationError('Invalid nodes format. "nodes" must be an object.')
    if data["rootNodeId"] not in data["nodes"]:
        raise TreeValidationError(f'Root node "{data["rootNodeId"]}" not found in nodes.')

    resolved_device_id = device_id or data.get("deviceId")
    if not resolved_device_id:
        raise TreeValidationError("No device selected for import.")

    if device_id:
        # The caller's device wins, so the file's own deviceId is not checked
        data = {key: value for key, value in data.items() if key != "deviceId"}

    try:
        document = DecisionTreeDocument.model_validate(data)
    except ValidationError as e:
        raise TreeValidationError(_describe(e)) from e

    for key, node in document.nodes.items():
        if node.id and node.id != key:
            raise TreeValidationError(
                f'Node "{key}" declares a different id "{node.id}".'
            )
        seen = set()
        for opt in node.options:
            if opt.id in seen:
                raise TreeValidationError(
                    f'Node "{key}" has more than one option with id "{opt.id}".'
                )
            seen.add(opt.id)

    tree = document.to_domain(resolved_device_id)

    # Dangling references are surfaced by the navigator when reached
    for node_id, option_id, target in tree.dangling_references():
        logger.warning(
            f"Tree '{tree.device_id}': option {node_id}.{option_id} points at unknown node '{target}'"
        )

    return tree


def validate_device_document(data: Union[dict, DeviceDocument]) -> DeviceDocument:
    """
    Checks that a device carries every required field.

    The id is left untouched; callers generate one when it is missing.
    """
    try:
        document = (
            data if isinstance(data, DeviceDocument) else DeviceDocument.model_validate(data)
        )
    except ValidationError as e:
        raise DeviceValidationError(_describe(e)) from e

    missing = [name for name in DEVICE_REQUIRED_FIELDS if not getattr(document, name).strip()]
    if missing:
        raise DeviceValidationError(
            f"Please fill in all required fields (missing: {', '.join(missing)})."
        )
    return document


def _describe(error: ValidationError) -> str:
    """Formats the first pydantic error as 'nodes.start.question: <msg>'."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"Invalid field '{location}': {first['msg']}."

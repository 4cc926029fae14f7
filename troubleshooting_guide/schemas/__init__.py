"""
Schemas - JSON Documents and Validation

Defines the camelCase Pydantic documents exchanged with storage and the API,
and the validation functions that turn untrusted JSON into domain objects.
"""

from troubleshooting_guide.schemas.documents import (
    DecisionTreeDocument,
    DeviceDocument,
    NodeDocument,
    OptionDocument,
)
from troubleshooting_guide.schemas.validation import (
    DeviceValidationError,
    TreeValidationError,
    validate_device_document,
    validate_tree_document,
)

__all__ = [
    "DecisionTreeDocument",
    "DeviceDocument",
    "NodeDocument",
    "OptionDocument",
    "DeviceValidationError",
    "TreeValidationError",
    "validate_device_document",
    "validate_tree_document",
]

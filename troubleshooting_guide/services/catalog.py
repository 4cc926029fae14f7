"""
Catalog Service - Devices and Troubleshooting Procedures

Wraps the device and decision tree repositories with the operations the
settings screens need: search and filter, upserts, cascading deletes and
JSON import. Every write is validated before it reaches a repository.
"""

import logging
import re
import time
from typing import Dict, List, Optional, Union

from ..domain.models import DecisionTree, Device
from ..repositories.decision_tree import DecisionTreeRepository
from ..repositories.device import DeviceRepository
from ..schemas.documents import DeviceDocument
from ..schemas.validation import validate_device_document, validate_tree_document
from .exceptions import DecisionTreeNotFoundError, DeviceNotFoundError

logger = logging.getLogger(__name__)


def _slug(value: str) -> str:
    return re.sub(r"\s+", "-", value.lower())


def generate_device_id(core_device: str, brand_name: str) -> str:
    return f"{_slug(core_device)}-{_slug(brand_name)}-{int(time.time() * 1000)}"


class CatalogService:
    def __init__(
        self,
        device_repository: DeviceRepository,
        tree_repository: DecisionTreeRepository,
    ):
        self.device_repo = device_repository
        self.tree_repo = tree_repository

    # ==========================================================================
    # Devices
    # ==========================================================================

    def list_devices(
        self,
        search: Optional[str] = None,
        core_device: Optional[str] = None,
        brand_name: Optional[str] = None,
    ) -> List[Device]:
        """
        Lists devices whose name or model contains `search` (case-insensitive),
        optionally narrowed to one product family or one brand.
        """
        term = (search or "").lower()
        devices = []
        for device in self.device_repo.list_devices():
            if term and term not in device.name.lower() and term not in device.model.lower():
                continue
            if core_device and device.core_device != core_device:
                continue
            if brand_name and device.brand_name != brand_name:
                continue
            devices.append(device)
        return devices

    def device_facets(self) -> Dict[str, List[str]]:
        devices = self.device_repo.list_devices()
        return {
            "core_devices": sorted({d.core_device for d in devices}),
            "brand_names": sorted({d.brand_name for d in devices}),
        }

    def get_device(self, device_id: str) -> Device:
        device = self.device_repo.get_device(device_id)
        if device is None:
            raise DeviceNotFoundError(f"Device '{device_id}' not found.")
        return device

    def save_device(self, data: Union[dict, DeviceDocument]) -> Device:
        """Creates the device if its id is new or missing, replaces it otherwise."""
        document = validate_device_document(data)
        if not document.id:
            document.id = generate_device_id(document.core_device, document.brand_name)

        device = document.to_domain()
        self.device_repo.upsert_device(device)
        logger.info(f"Saved device '{device.id}'")
        return device

    def delete_device(self, device_id: str) -> bool:
        """
        Deletes a device and then its procedure. The two deletes are
        independent; a device without a tree is not an error.
        """
        deleted = self.device_repo.delete_device(device_id)
        if not deleted:
            logger.warning(f"Delete requested for unknown device '{device_id}'")
        if self.tree_repo.delete_tree(device_id):
            logger.info(f"Deleted decision tree of device '{device_id}'")
        return deleted

    # ==========================================================================
    # Decision Trees
    # ==========================================================================

    def list_trees(self) -> Dict[str, DecisionTree]:
        return self.tree_repo.list_trees()

    def get_tree(self, device_id: str) -> DecisionTree:
        tree = self.tree_repo.get_tree(device_id)
        if tree is None:
            raise DecisionTreeNotFoundError(
                f"No troubleshooting procedure found for device '{device_id}'."
            )
        return tree

    def save_tree(self, data: dict) -> DecisionTree:
        """Validates a full tree document (including deviceId) and stores it."""
        tree = validate_tree_document(data)
        self.tree_repo.upsert_tree(tree)
        logger.info(f"Saved decision tree for device '{tree.device_id}'")
        return tree

    def delete_tree(self, device_id: str) -> bool:
        return self.tree_repo.delete_tree(device_id)

    def import_tree(self, device_id: str, data: Union[str, bytes, dict]) -> DecisionTree:
        """
        Imports a JSON procedure for an existing device, replacing any
        previous one. Rejected documents leave the store untouched.
        """
        self.get_device(device_id)
        tree = validate_tree_document(data, device_id=device_id)
        self.tree_repo.upsert_tree(tree)
        logger.info(
            f"Imported decision tree for device '{device_id}' ({len(tree.nodes)} nodes)"
        )
        return tree

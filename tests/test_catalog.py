import re

import pytest

from troubleshooting_guide.schemas import DeviceValidationError, TreeValidationError
from troubleshooting_guide.services.exceptions import (
    DecisionTreeNotFoundError,
    DeviceNotFoundError,
)


def _ids(devices):
    return {d.id for d in devices}


def test_search_matches_name_or_model_case_insensitively(catalog):
    assert _ids(catalog.list_devices(search="PRO")) == {
        "hair-dryer-pro-2024",
        "facial-steamer-spa",  # model FS-SPA-PRO
        "scalp-reader-loreal",
    }


def test_filter_by_brand_and_core_device(catalog):
    assert _ids(catalog.list_devices(brand_name="Armani")) == {
        "kscan-armani",
        "hair-dryer-armani",
    }
    assert _ids(catalog.list_devices(core_device="Hair Dryer")) == {
        "hair-dryer-pro-2024",
        "hair-dryer-armani",
    }


def test_search_and_filter_combine(catalog):
    assert _ids(catalog.list_devices(search="elite", brand_name="Armani")) == {
        "hair-dryer-armani"
    }


def test_no_criteria_lists_everything(catalog, device_repo):
    assert len(catalog.list_devices()) == len(device_repo.list_devices())


def test_facets_are_sorted_and_unique(catalog):
    facets = catalog.device_facets()

    assert facets["brand_names"] == ["Armani", "L'Oréal"]
    assert facets["core_devices"] == sorted(facets["core_devices"])
    assert facets["core_devices"].count("Hair Dryer") == 1


def test_save_device_generates_an_id(catalog):
    device = catalog.save_device(
        {"name": "Travel Dryer", "model": "TD-1", "coreDevice": "Hair Dryer", "brandName": "Acme Corp"}
    )

    assert re.fullmatch(r"hair-dryer-acme-corp-\d+", device.id)
    assert catalog.get_device(device.id).name == "Travel Dryer"


def test_save_device_replaces_matching_id(catalog):
    catalog.save_device(
        {
            "id": "kscan-armani",
            "name": "KSCAN 2",
            "model": "KSCAN-ARM-2025",
            "coreDevice": "ScalpReader",
            "brandName": "Armani",
        }
    )

    assert catalog.get_device("kscan-armani").model == "KSCAN-ARM-2025"
    assert len(catalog.list_devices(search="kscan")) == 1


def test_invalid_device_is_not_stored(catalog, device_repo):
    count = len(device_repo.list_devices())

    with pytest.raises(DeviceValidationError):
        catalog.save_device({"name": "No model"})

    assert len(device_repo.list_devices()) == count


def test_delete_device_cascades_to_its_tree(catalog):
    assert catalog.delete_device("hair-dryer-pro-2024")

    with pytest.raises(DeviceNotFoundError):
        catalog.get_device("hair-dryer-pro-2024")
    with pytest.raises(DecisionTreeNotFoundError):
        catalog.get_tree("hair-dryer-pro-2024")
    assert "straightener-elite-x1" in catalog.list_trees()


def test_delete_unknown_device_is_harmless(catalog):
    assert not catalog.delete_device("no-such-device")


def test_import_tree_for_device(catalog, tree_document):
    tree = catalog.import_tree("curling-iron-deluxe", tree_document)

    assert tree.device_id == "curling-iron-deluxe"
    assert catalog.get_tree("curling-iron-deluxe").root_node_id == "start"


def test_rejected_import_leaves_store_untouched(catalog, tree_document):
    before = catalog.get_tree("straightener-elite-x1")
    tree_document["rootNodeId"] = "missing"

    with pytest.raises(TreeValidationError, match='Root node "missing" not found in nodes.'):
        catalog.import_tree("straightener-elite-x1", tree_document)

    assert catalog.get_tree("straightener-elite-x1") is before


def test_import_requires_known_device(catalog, tree_document):
    with pytest.raises(DeviceNotFoundError):
        catalog.import_tree("ghost-device", tree_document)


def test_save_tree_uses_document_device_id(catalog, tree_document):
    tree_document["deviceId"] = "facial-steamer-spa"

    catalog.save_tree(tree_document)

    assert set(catalog.get_tree("facial-steamer-spa").nodes) == {"start", "check-fuse"}


def test_delete_tree(catalog):
    assert catalog.delete_tree("straightener-elite-x1")
    assert not catalog.delete_tree("straightener-elite-x1")
    assert "straightener-elite-x1" not in catalog.list_trees()

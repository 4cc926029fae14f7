"""Shared test fixtures."""

import copy

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine

from troubleshooting_guide.app.dependencies import get_catalog_service, get_navigation_service
from troubleshooting_guide.app.main import app
from troubleshooting_guide.data.hardcoded_trees import HARDCODED_DEVICES, HARDCODED_TREES
from troubleshooting_guide.domain.models import DecisionNode, DecisionOption, DecisionTree
from troubleshooting_guide.infrastructure.database.connection import init_db
from troubleshooting_guide.repositories.decision_tree import InMemoryDecisionTreeRepository
from troubleshooting_guide.repositories.device import InMemoryDeviceRepository
from troubleshooting_guide.repositories.session import InMemorySessionRepository
from troubleshooting_guide.services.catalog import CatalogService
from troubleshooting_guide.services.navigation import NavigationService

HAIR_DRYER = "hair-dryer-pro-2024"


@pytest.fixture
def hair_dryer_tree():
    return copy.deepcopy(HARDCODED_TREES[HAIR_DRYER])


@pytest.fixture
def cycle_tree():
    """A -> B -> A, with a way out of B."""
    return DecisionTree(
        device_id="loop-device",
        root_node_id="a",
        nodes={
            "a": DecisionNode(
                id="a",
                question="Is the light blinking?",
                options=[DecisionOption(id="to-b", text="Yes", next_node_id="b")],
            ),
            "b": DecisionNode(
                id="b",
                question="Did a reset help?",
                options=[
                    DecisionOption(id="to-a", text="Check again", next_node_id="a"),
                    DecisionOption(id="done", text="Yes", solution="Nothing else to do."),
                ],
            ),
        },
    )


@pytest.fixture
def tree_document():
    """A small importable procedure, in the camelCase file format."""
    return {
        "rootNodeId": "start",
        "nodes": {
            "start": {
                "id": "start",
                "question": "Does the barrel heat up?",
                "description": "Wait two minutes after switching on",
                "options": [
                    {"id": "no-heat", "text": "No", "nextNodeId": "check-fuse"},
                    {"id": "heats", "text": "Yes", "solution": "Device works as expected."},
                ],
            },
            "check-fuse": {
                "id": "check-fuse",
                "question": "Replace the plug fuse.",
                "isTerminal": True,
                "options": [],
                "solution": "Replace the 3A fuse in the plug.",
                "additionalInfo": "Use a fuse of the same rating.",
            },
        },
    }


@pytest.fixture
def device_repo():
    return InMemoryDeviceRepository(copy.deepcopy(HARDCODED_DEVICES))


@pytest.fixture
def tree_repo():
    return InMemoryDecisionTreeRepository(copy.deepcopy(HARDCODED_TREES))


@pytest.fixture
def catalog(device_repo, tree_repo):
    return CatalogService(device_repository=device_repo, tree_repository=tree_repo)


@pytest.fixture
def navigation_service(tree_repo):
    return NavigationService(
        session_repository=InMemorySessionRepository(),
        tree_repository=tree_repo,
        expected_steps=5,
    )


@pytest.fixture
def client(catalog, navigation_service):
    app.dependency_overrides[get_catalog_service] = lambda: catalog
    app.dependency_overrides[get_navigation_service] = lambda: navigation_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sql_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()

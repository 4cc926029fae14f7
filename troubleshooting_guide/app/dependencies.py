"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the core Singleton services (Repositories, Services).
2. Choosing the storage backend from settings.STORAGE_BACKEND.
3. Managing the lifecycle of these objects using @lru_cache to ensure
   they are created only once per application process.

Tests swap whole services through app.dependency_overrides.
"""


import copy
from functools import lru_cache
from fastapi import Depends

from ..config import settings
from ..data.hardcoded_trees import HARDCODED_DEVICES, HARDCODED_TREES
from ..repositories.decision_tree import (
    DecisionTreeRepository,
    InMemoryDecisionTreeRepository,
    SqlDecisionTreeRepository,
)
from ..repositories.device import DeviceRepository, InMemoryDeviceRepository, SqlDeviceRepository
from ..repositories.session import SessionRepository, InMemorySessionRepository
from ..services.catalog import CatalogService
from ..services.navigation import NavigationService

from ..infrastructure.database.connection import init_db

# Device Repository (Singleton)
# Note: In-memory storage must be a singleton so data persists across requests!
@lru_cache()
def get_device_repository() -> DeviceRepository:
    if settings.STORAGE_BACKEND == "database":
        init_db()
        return SqlDeviceRepository()
    seed = copy.deepcopy(HARDCODED_DEVICES) if settings.SEED_BUILTIN_DATA else []
    return InMemoryDeviceRepository(seed)

# Decision Tree Repository (Singleton)
@lru_cache()
def get_tree_repository() -> DecisionTreeRepository:
    if settings.STORAGE_BACKEND == "database":
        init_db()
        return SqlDecisionTreeRepository()
    seed = copy.deepcopy(HARDCODED_TREES) if settings.SEED_BUILTIN_DATA else {}
    return InMemoryDecisionTreeRepository(seed)

# Session Repository (Singleton)
# Sessions never outlive the process, whatever the storage backend
@lru_cache()
def get_session_repository() -> SessionRepository:
    return InMemorySessionRepository()

# The Catalog Service (Singleton Service)
@lru_cache()
def get_catalog_service(
    device_repo: DeviceRepository = Depends(get_device_repository),
    tree_repo: DecisionTreeRepository = Depends(get_tree_repository),
) -> CatalogService:
    return CatalogService(device_repository=device_repo, tree_repository=tree_repo)

# The Navigation Service (Singleton Service)
@lru_cache()
def get_navigation_service(
    session_repo: SessionRepository = Depends(get_session_repository),
    tree_repo: DecisionTreeRepository = Depends(get_tree_repository),
) -> NavigationService:
    """
    Injects the session store and the tree store into the NavigationService.
    """
    return NavigationService(
        session_repository=session_repo,
        tree_repository=tree_repo,
        expected_steps=settings.PROGRESS_EXPECTED_STEPS,
    )

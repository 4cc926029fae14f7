import logging

from fastapi import FastAPI, HTTPException, Depends, Request, status
from fastapi.responses import JSONResponse, Response

from ..config import settings
from ..navigation.exceptions import NodeNotFoundError, UnknownOptionError
from ..schemas.documents import DecisionTreeDocument, DeviceDocument
from ..schemas.validation import DeviceValidationError, TreeValidationError
from ..services.catalog import CatalogService
from ..services.exceptions import (
    DecisionTreeNotFoundError,
    DeviceNotFoundError,
    SessionNotFoundError,
)
from ..services.navigation import NavigationService
from .dependencies import get_catalog_service, get_navigation_service
from .schemas import (
    CreateSessionRequest,
    DeviceFacets,
    ErrorResponse,
    SelectOptionRequest,
    SessionResponse,
)

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Device Troubleshooting Guide")

NOT_FOUND = {404: {"model": ErrorResponse}}

# --- Error Mapping ---

def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(SessionNotFoundError)
@app.exception_handler(DeviceNotFoundError)
@app.exception_handler(DecisionTreeNotFoundError)
async def not_found_handler(request: Request, exc: Exception):
    return _error(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(UnknownOptionError)
async def unknown_option_handler(request: Request, exc: UnknownOptionError):
    # The client offered an option the node does not have: it is out of sync
    logger.warning(f"{request.url.path}: {exc}")
    return _error(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(NodeNotFoundError)
async def malformed_tree_handler(request: Request, exc: NodeNotFoundError):
    logger.error(f"Malformed decision tree '{exc.device_id}': {exc}")
    return _error(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(TreeValidationError)
@app.exception_handler(DeviceValidationError)
async def validation_handler(request: Request, exc: ValueError):
    return _error(422, exc)


# --- Devices ---

@app.get("/devices")
def list_devices(
    search: str | None = None,
    core_device: str | None = None,
    brand_name: str | None = None,
    catalog: CatalogService = Depends(get_catalog_service),
):
    devices = catalog.list_devices(search=search, core_device=core_device, brand_name=brand_name)
    return [DeviceDocument.from_domain(d).to_json() for d in devices]


@app.get("/devices/facets", response_model=DeviceFacets)
def device_facets(catalog: CatalogService = Depends(get_catalog_service)):
    """Distinct product families and brands, for the filter buttons."""
    return DeviceFacets(**catalog.device_facets())


@app.post("/devices")
def save_device(
    device: DeviceDocument,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Creates or replaces a device. Returns the full device list."""
    catalog.save_device(device)
    return [DeviceDocument.from_domain(d).to_json() for d in catalog.list_devices()]


@app.delete("/devices/{device_id}")
def delete_device(
    device_id: str,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Deletes a device together with its troubleshooting procedure."""
    catalog.delete_device(device_id)
    return [DeviceDocument.from_domain(d).to_json() for d in catalog.list_devices()]


# --- Decision Trees ---

def _trees_payload(catalog: CatalogService) -> dict:
    return {
        device_id: DecisionTreeDocument.from_domain(tree).to_json()
        for device_id, tree in catalog.list_trees().items()
    }


@app.get("/decision-trees")
def list_trees(catalog: CatalogService = Depends(get_catalog_service)):
    return _trees_payload(catalog)


@app.get("/decision-trees/{device_id}", responses=NOT_FOUND)
def get_tree(device_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    return DecisionTreeDocument.from_domain(catalog.get_tree(device_id)).to_json()


@app.post("/decision-trees")
def save_tree(
    tree: dict,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Creates or replaces the tree keyed by its deviceId. Returns all trees."""
    catalog.save_tree(tree)
    return _trees_payload(catalog)


@app.delete("/decision-trees/{device_id}")
def delete_tree(device_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    catalog.delete_tree(device_id)
    return _trees_payload(catalog)


@app.post("/decision-trees/{device_id}/import", responses=NOT_FOUND)
async def import_tree(
    device_id: str,
    request: Request,
    catalog: CatalogService = Depends(get_catalog_service),
):
    """
    Imports a JSON procedure file for a device. The body is the raw file
    content; it must hold "rootNodeId" and "nodes".
    """
    raw = await request.body()
    tree = catalog.import_tree(device_id, raw)
    return DecisionTreeDocument.from_domain(tree).to_json()


# --- Navigation Sessions ---

@app.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
def create_session(
    body: CreateSessionRequest,
    service: NavigationService = Depends(get_navigation_service),
):
    """Starts troubleshooting a device at the root of its tree."""
    session = service.start_session(body.device_id)
    return service.describe(session)


@app.get("/sessions/{session_id}", response_model=SessionResponse, responses=NOT_FOUND)
def get_session(
    session_id: str,
    service: NavigationService = Depends(get_navigation_service),
):
    return service.describe(service.get_session(session_id))


@app.post("/sessions/{session_id}/select", response_model=SessionResponse, responses=NOT_FOUND)
def select_option(
    session_id: str,
    body: SelectOptionRequest,
    service: NavigationService = Depends(get_navigation_service),
):
    session = service.select(session_id, body.option_id)
    return service.describe(session)


@app.post("/sessions/{session_id}/back", response_model=SessionResponse, responses=NOT_FOUND)
def step_back(
    session_id: str,
    service: NavigationService = Depends(get_navigation_service),
):
    return service.describe(service.back(session_id))


@app.post("/sessions/{session_id}/restart", response_model=SessionResponse, responses=NOT_FOUND)
def restart(
    session_id: str,
    service: NavigationService = Depends(get_navigation_service),
):
    return service.describe(service.restart(session_id))


@app.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(
    session_id: str,
    service: NavigationService = Depends(get_navigation_service),
):
    """
    Ends a session. Returns 204 No Content on success.
    """
    if not service.end_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")

    # For 204, we must explicitly return a Response object with no content
    return Response(status_code=status.HTTP_204_NO_CONTENT)

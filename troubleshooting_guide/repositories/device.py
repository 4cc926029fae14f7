from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from ..domain.models import Device
from ..infrastructure.database.connection import engine as default_engine
from ..infrastructure.database.tables import DeviceDBModel


class DeviceRepository(ABC):
    """
    Defines how the application accesses Devices.
    This allows us change how data is accessed (Memory -> SQL -> API) later
    without changing the services.
    """

    @abstractmethod
    def list_devices(self) -> List[Device]:
        pass

    @abstractmethod
    def get_device(self, device_id: str) -> Optional[Device]:
        pass

    @abstractmethod
    def upsert_device(self, device: Device):
        """Creates the device if its id is unseen, replaces it otherwise."""
        pass

    @abstractmethod
    def delete_device(self, device_id: str) -> bool:
        """Deletes a device. Returns True if found and deleted."""
        pass


class InMemoryDeviceRepository(DeviceRepository):
    """
    Keeps devices in a dict, in insertion order.
    """

    def __init__(self, devices: Optional[List[Device]] = None):
        self._store: Dict[str, Device] = {d.id: d for d in devices or []}

    def list_devices(self) -> List[Device]:
        return list(self._store.values())

    def get_device(self, device_id: str) -> Optional[Device]:
        return self._store.get(device_id)

    def upsert_device(self, device: Device):
        self._store[device.id] = device

    def delete_device(self, device_id: str) -> bool:
        if device_id in self._store:
            del self._store[device_id]
            return True
        return False


class SqlDeviceRepository(DeviceRepository):
    """
    Reads and writes the 'devices' table.
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else default_engine

    def list_devices(self) -> List[Device]:
        with Session(self.engine) as db:
            rows = db.exec(select(DeviceDBModel).order_by(DeviceDBModel.created_at)).all()
            return [self._to_domain(row) for row in rows]

    def get_device(self, device_id: str) -> Optional[Device]:
        with Session(self.engine) as db:
            row = db.get(DeviceDBModel, device_id)
            return self._to_domain(row) if row else None

    def upsert_device(self, device: Device):
        with Session(self.engine) as db:
            row = db.get(DeviceDBModel, device.id)
            if row:
                row.name = device.name
                row.model = device.model
                row.core_device = device.core_device
                row.brand_name = device.brand_name
                row.image_url = device.image_url
                row.updated_at = datetime.utcnow()
            else:
                row = DeviceDBModel(
                    device_id=device.id,
                    name=device.name,
                    model=device.model,
                    core_device=device.core_device,
                    brand_name=device.brand_name,
                    image_url=device.image_url,
                )
            db.add(row)
            db.commit()

    def delete_device(self, device_id: str) -> bool:
        with Session(self.engine) as db:
            row = db.get(DeviceDBModel, device_id)
            if row:
                db.delete(row)
                db.commit()
                return True
            return False

    @staticmethod
    def _to_domain(row: DeviceDBModel) -> Device:
        return Device(
            id=row.device_id,
            name=row.name,
            model=row.model,
            core_device=row.core_device,
            brand_name=row.brand_name,
            image_url=row.image_url,
        )

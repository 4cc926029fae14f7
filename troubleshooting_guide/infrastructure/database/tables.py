"""
Database Table Definitions.

This module defines the SQL schema using SQLModel.
We use the 'DBModel' suffix to distinguish these persistence models
from the domain dataclasses (Device, DecisionTree).
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel


class DeviceDBModel(SQLModel, table=True):
    """
    Persistence model for Devices.
    Maps 1-to-1 with the 'devices' table.
    """

    __tablename__ = "devices"

    device_id: str = Field(primary_key=True)
    name: str
    model: str
    core_device: str = Field(index=True)
    brand_name: str = Field(index=True)
    image_url: Optional[str] = None

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class DecisionTreeDBModel(SQLModel, table=True):
    """
    Persistence model for Decision Trees.
    Maps 1-to-1 with the 'decision_trees' table, keyed by device.
    """

    __tablename__ = "decision_trees"

    device_id: str = Field(primary_key=True)
    root_node_id: str

    # Store the entire camelCase tree document (nodes, options) as JSON.
    tree_data: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))

    version: int = Field(default=1)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

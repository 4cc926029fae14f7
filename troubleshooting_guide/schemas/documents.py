"""
Schemas - JSON Documents for Devices and Decision Trees

This module defines the Pydantic models for the camelCase JSON documents that
are stored, imported and returned by the API. They are the boundary between
untyped JSON and the domain dataclasses: each document knows how to build its
domain object and how to be built from one.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..domain.models import DecisionNode, DecisionOption, DecisionTree, Device


class Document(BaseModel):
    """Accepts camelCase keys (and snake_case field names), ignores unknown keys."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DeviceDocument(Document):
    id: Optional[str] = None
    name: str = ""
    model: str = ""
    core_device: str = ""
    brand_name: str = ""
    image_url: Optional[str] = None

    def to_domain(self) -> Device:
        return Device(
            id=self.id,
            name=self.name,
            model=self.model,
            core_device=self.core_device,
            brand_name=self.brand_name,
            image_url=self.image_url or None,
        )

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceDocument":
        return cls(
            id=device.id,
            name=device.name,
            model=device.model,
            core_device=device.core_device,
            brand_name=device.brand_name,
            image_url=device.image_url,
        )


class OptionDocument(Document):
    id: str = Field(..., min_length=1)
    text: str
    next_node_id: Optional[str] = None
    solution: Optional[str] = None

    def to_domain(self) -> DecisionOption:
        return DecisionOption(
            id=self.id,
            text=self.text,
            next_node_id=self.next_node_id or None,
            solution=self.solution or None,
        )


class NodeDocument(Document):
    # Defaults to the node's key in the tree when omitted
    id: Optional[str] = None
    question: str = Field(..., min_length=1)
    description: Optional[str] = None
    options: List[OptionDocument] = Field(default_factory=list)
    is_terminal: Optional[bool] = None
    solution: Optional[str] = None
    additional_info: Optional[str] = None

    @field_validator("question")
    @classmethod
    def question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be blank")
        return value

    def to_domain(self, node_id: str) -> DecisionNode:
        return DecisionNode(
            id=self.id or node_id,
            question=self.question,
            description=self.description,
            options=[opt.to_domain() for opt in self.options],
            is_terminal=bool(self.is_terminal),
            solution=self.solution,
            additional_info=self.additional_info,
        )

    @classmethod
    def from_domain(cls, node: DecisionNode) -> "NodeDocument":
        return cls(
            id=node.id,
            question=node.question,
            description=node.description,
            options=[
                OptionDocument(
                    id=opt.id,
                    text=opt.text,
                    next_node_id=opt.next_node_id,
                    solution=opt.solution,
                )
                for opt in node.options
            ],
            is_terminal=node.is_terminal or None,
            solution=node.solution,
            additional_info=node.additional_info,
        )


class DecisionTreeDocument(Document):
    device_id: Optional[str] = None
    root_node_id: str
    nodes: Dict[str, NodeDocument]

    def to_domain(self, device_id: Optional[str] = None) -> DecisionTree:
        return DecisionTree(
            device_id=device_id or self.device_id,
            root_node_id=self.root_node_id,
            nodes={key: node.to_domain(key) for key, node in self.nodes.items()},
        )

    @classmethod
    def from_domain(cls, tree: DecisionTree) -> "DecisionTreeDocument":
        return cls(
            device_id=tree.device_id,
            root_node_id=tree.root_node_id,
            nodes={key: NodeDocument.from_domain(node) for key, node in tree.nodes.items()},
        )

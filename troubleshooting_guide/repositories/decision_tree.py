from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, select

from ..domain.models import DecisionTree
from ..infrastructure.database.connection import engine as default_engine
from ..infrastructure.database.tables import DecisionTreeDBModel
from ..schemas.documents import DecisionTreeDocument


# The Interface
class DecisionTreeRepository(ABC):
    """
    Defines how the application accesses Decision Trees, keyed by device id.
    Trees handed out are treated as read-only snapshots; updates replace the
    whole tree.
    """

    @abstractmethod
    def list_trees(self) -> Dict[str, DecisionTree]:
        pass

    @abstractmethod
    def get_tree(self, device_id: str) -> Optional[DecisionTree]:
        pass

    @abstractmethod
    def upsert_tree(self, tree: DecisionTree):
        pass

    @abstractmethod
    def delete_tree(self, device_id: str) -> bool:
        """Deletes a tree. Returns True if found and deleted."""
        pass


class InMemoryDecisionTreeRepository(DecisionTreeRepository):
    """
    Keeps trees in a dict keyed by device id.
    """

    def __init__(self, trees: Optional[Dict[str, DecisionTree]] = None):
        # Index for O(1) lookup
        self._index: Dict[str, DecisionTree] = dict(trees or {})

    def list_trees(self) -> Dict[str, DecisionTree]:
        return dict(self._index)

    def get_tree(self, device_id: str) -> Optional[DecisionTree]:
        return self._index.get(device_id)

    def upsert_tree(self, tree: DecisionTree):
        self._index[tree.device_id] = tree

    def delete_tree(self, device_id: str) -> bool:
        return self._index.pop(device_id, None) is not None


class SqlDecisionTreeRepository(DecisionTreeRepository):
    """
    Reads from the 'decision_trees' table (JSON document per device).
    """

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine if engine is not None else default_engine

    def list_trees(self) -> Dict[str, DecisionTree]:
        with Session(self.engine) as db:
            rows = db.exec(select(DecisionTreeDBModel)).all()
            return {row.device_id: self._to_domain(row) for row in rows}

    def get_tree(self, device_id: str) -> Optional[DecisionTree]:
        with Session(self.engine) as db:
            row = db.get(DecisionTreeDBModel, device_id)
            return self._to_domain(row) if row else None

    def upsert_tree(self, tree: DecisionTree):
        tree_data = DecisionTreeDocument.from_domain(tree).to_json()

        with Session(self.engine) as db:
            row = db.get(DecisionTreeDBModel, tree.device_id)
            if row:
                # Update the JSON blob, the version and the timestamp
                row.root_node_id = tree.root_node_id
                row.tree_data = tree_data
                row.version += 1
                row.updated_at = datetime.utcnow()
            else:
                row = DecisionTreeDBModel(
                    device_id=tree.device_id,
                    root_node_id=tree.root_node_id,
                    tree_data=tree_data,
                )
            db.add(row)
            db.commit()

    def delete_tree(self, device_id: str) -> bool:
        with Session(self.engine) as db:
            row = db.get(DecisionTreeDBModel, device_id)
            if row:
                db.delete(row)
                db.commit()
                return True
            return False

    @staticmethod
    def _to_domain(row: DecisionTreeDBModel) -> DecisionTree:
        # Deserialize JSON -> Pydantic document -> domain dataclasses
        return DecisionTreeDocument.model_validate(row.tree_data).to_domain(row.device_id)

from __future__ import annotations

from typing import Iterable, Optional

from .model import Child, Parent

# Demo directory (a real deployment would read this from the kindergarten database).
DEMO_FAMILIES: tuple[dict, ...] = (
    {
        "parent_id": "parent123",
        "name": "Sarah Johnson",
        "children": (
            ("child-1", "Emma Johnson", "Rainbow Class", "Ms. Anderson", 4),
            ("child-2", "Liam Johnson", "Sunshine Class", "Mr. Wilson", 5),
        ),
    },
    {
        "parent_id": "PAR001",
        "name": "Michael Smith",
        "children": (
            ("child-3", "Alex Smith", "Adventure Class", "Ms. Brown", 5),
        ),
    },
    {
        "parent_id": "PAR002",
        "name": "Maria Garcia",
        "children": (
            ("child-4", "Sofia Garcia", "Rainbow Class", "Ms. Anderson", 4),
            ("child-5", "Diego Garcia", "Explorer Class", "Ms. Davis", 3),
            ("child-6", "Carlos Garcia", "Adventure Class", "Ms. Brown", 5),
        ),
    },
)


class InMemoryDirectoryRepository:
    def __init__(self, parents: Iterable[Parent]):
        self._parents: dict[str, Parent] = {}
        self._children: dict[str, Child] = {}
        for parent in parents:
            self._parents[parent.parent_id] = parent
            for child in parent.children:
                self._children[child.id] = child

    @classmethod
    def from_families(cls, families: Iterable[dict]) -> "InMemoryDirectoryRepository":
        parents = []
        for fam in families:
            children = tuple(
                Child(id=cid, name=name, class_name=class_name, teacher=teacher, age=age, parent_id=fam["parent_id"])
                for cid, name, class_name, teacher, age in fam["children"]
            )
            parents.append(Parent(parent_id=fam["parent_id"], name=fam["name"], children=children))
        return cls(parents)

    @classmethod
    def demo(cls) -> "InMemoryDirectoryRepository":
        return cls.from_families(DEMO_FAMILIES)

    def get_child(self, child_id: str) -> Optional[Child]:
        return self._children.get(child_id)

    def get_parent(self, parent_id: str) -> Optional[Parent]:
        return self._parents.get(parent_id)


from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Child:
    """A child enrolled in one class, owned by the static directory."""

    id: str
    name: str
    class_name: str
    teacher: str
    age: int
    parent_id: str


@dataclass(frozen=True)
class Parent:
    parent_id: str
    name: str
    children: tuple[Child, ...]

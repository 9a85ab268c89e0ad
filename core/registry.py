"""
Tool Registry

An ordered, read-only catalog of tool descriptors. It is built once at
startup from the tool modules and never changes afterwards. Lookup of an
unknown name returns None; deciding what that means is the dispatcher's job.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_spec(spec: Dict[str, Any]) -> "ToolDescriptor":
        return ToolDescriptor(
            name=spec["name"],
            description=spec.get("description", ""),
            input_schema=copy.deepcopy(spec.get("inputSchema") or {"type": "object"}),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }


class ToolRegistry:
    def __init__(self, descriptors: Iterable[ToolDescriptor]) -> None:
        ordered = tuple(descriptors)
        by_name: Dict[str, ToolDescriptor] = {}
        for d in ordered:
            if not isinstance(d.name, str) or not d.name.strip():
                raise ValueError("tool name must be a non-empty string")
            if d.name in by_name:
                raise ValueError(f"tool already registered: {d.name}")
            by_name[d.name] = d
        self._ordered: Tuple[ToolDescriptor, ...] = ordered
        self._by_name = by_name

    def list(self) -> Tuple[ToolDescriptor, ...]:
        return self._ordered

    def find(self, name: str) -> Optional[ToolDescriptor]:
        return self._by_name.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self._ordered)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._ordered)

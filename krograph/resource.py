"""Resources of a resource group, with their schema, variables and dependencies."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from krograph.meta import GroupVersionResource
from krograph.spec import Schema, top_level_field_names
from krograph.variable import ResourceField


@dataclass
class Resource:
    """A resource of a resource group.

    ``original_object`` holds the definition exactly as written, expressions
    included; ``emulated_object`` holds the same object with expressions
    replaced by emulated values.
    """

    id: str = ""
    gvr: GroupVersionResource = field(default_factory=GroupVersionResource)
    schema: Schema | None = None
    crd: dict[str, Any] | None = None
    original_object: dict[str, Any] = field(default_factory=dict)
    emulated_object: dict[str, Any] | None = None
    variables: list[ResourceField] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    ready_when_expressions: list[str] = field(default_factory=list)
    include_when_expressions: list[str] = field(default_factory=list)
    namespaced: bool = False

    def has_dependency(self, dep: str) -> bool:
        """True if this resource depends on ``dep``."""
        return dep in self.dependencies

    def add_dependency(self, dep: str) -> None:
        """Record a dependency unless it is already recorded."""
        if not self.has_dependency(dep):
            self.dependencies.append(dep)

    def add_dependencies(self, *deps: str) -> None:
        """Record several dependencies, skipping those already present."""
        for dep in deps:
            self.add_dependency(dep)

    def top_level_fields(self) -> list[str]:
        """Sorted top-level field names of the schema, without apiVersion and kind."""
        return top_level_field_names(self.schema)

    def deep_copy(self) -> Resource:
        """A copy with its own object and lists.

        The schema is shared; the CRD and the emulated object are not carried over.
        """
        return Resource(
            id=self.id,
            gvr=self.gvr,
            schema=self.schema,
            original_object=copy.deepcopy(self.original_object),
            variables=list(self.variables),
            dependencies=list(self.dependencies),
            ready_when_expressions=list(self.ready_when_expressions),
            include_when_expressions=list(self.include_when_expressions),
            namespaced=self.namespaced,
        )
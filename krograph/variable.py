"""Descriptions of resource fields that hold expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from krograph.spec import Schema


@dataclass
class FieldDescriptor:
    """A field holding one or more expressions.

    ``path`` locates the field in the resource, e.g.
    ``spec.template.spec.containers[0].env[0].value``. ``expected_schema``
    is only set for standalone expressions, where the whole field value is
    produced by a single expression.
    """

    path: str = ""
    expressions: list[str] = field(default_factory=list)
    expected_type: str = ""
    expected_schema: Schema | None = None
    standalone_expression: bool = False


class ResourceVariableKind(str, Enum):
    """When a resource variable can be resolved."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    READY_WHEN = "readyWhen"
    INCLUDE_WHEN = "includeWhen"

    def __str__(self) -> str:
        return self.value

    def is_static(self) -> bool:
        return self is ResourceVariableKind.STATIC

    def is_dynamic(self) -> bool:
        return self is ResourceVariableKind.DYNAMIC

    def is_include_when(self) -> bool:
        return self is ResourceVariableKind.INCLUDE_WHEN


@dataclass
class ResourceField(FieldDescriptor):
    """A field descriptor together with its variable kind and dependencies."""

    kind: ResourceVariableKind | None = None
    dependencies: list[str] = field(default_factory=list)

    def add_dependencies(self, *deps: str) -> None:
        """Append each dependency not already present, keeping order."""
        for dep in deps:
            if dep not in self.dependencies:
                self.dependencies.append(dep)
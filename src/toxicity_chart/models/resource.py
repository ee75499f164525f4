"""Resource models describing the analyzed project tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResourceQualifier(str, Enum):
    """Kinds of nodes in the analyzed resource tree."""

    PROJECT = "TRK"
    MODULE = "BRC"
    DIRECTORY = "DIR"
    FILE = "FIL"
    UNIT_TEST_FILE = "UTS"


@dataclass(frozen=True, slots=True)
class Resource:
    """A node of the analyzed tree, the project itself included.

    ``is_root`` stays ``None`` when the host does not say whether the
    resource is the tree root.
    """

    key: Optional[str]
    name: str = ""
    long_name: str = ""
    qualifier: ResourceQualifier = ResourceQualifier.FILE
    parent_key: Optional[str] = None
    is_root: Optional[bool] = None

    @classmethod
    def project(
        cls,
        key: Optional[str],
        name: str = "",
        *,
        is_root: Optional[bool] = None,
    ) -> "Resource":
        """Create a project-qualified resource."""

        label = name or key or ""
        return cls(
            key=key,
            name=label,
            long_name=label,
            qualifier=ResourceQualifier.PROJECT,
            is_root=is_root,
        )

    @property
    def identity(self) -> str:
        """Return the identity used to track visited resources.

        Resources without a key or name fall back to the object identity so
        they are never mistaken for one another.
        """

        return self.key or self.long_name or self.name or f"#{id(self)}"

    @property
    def is_project(self) -> bool:
        return self.qualifier is ResourceQualifier.PROJECT

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ModalAllowList:
    resources: frozenset[str] = field(default_factory=frozenset)
    modules: frozenset[str] = field(default_factory=frozenset)

    def allows(self, modname: str, resource_type: Optional[str] = None) -> bool:
        if resource_type and resource_type in self.resources:
            return True
        return modname in self.resources or modname in self.modules

    def to_payload(self) -> dict[str, list[str]]:
        return {
            "resources": sorted(self.resources),
            "modules": sorted(self.modules),
        }


@dataclass(frozen=True)
class CourseModuleInfo:
    id: int
    courseid: int
    modulecontextid: int
    coursecontextid: int
    name: str
    modname: str
    sectionnumber: int
    sectionid: int
    completionenabled: bool
    completionstate: Optional[int]
    iscomplete: bool
    ismanualcompletion: bool
    resourcetype: Optional[str]
    pluginfileurl: str
    modalallowed: bool

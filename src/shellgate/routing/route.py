"""DynamicRoute, RouteRecord and RouteMatch frozen dataclasses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class DynamicRoute:
    """A page whose URL has parameters, served from one pre-rendered shell.

    Created by a scan pass, never persisted. ``params`` is ordered like the
    capture groups of ``pattern``.
    """

    file: str
    route: str
    pattern: re.Pattern[str]
    shell_path: str
    params: tuple[str, ...]

    def to_record(self) -> RouteRecord:
        """The serializable subset shipped inside the worker artifact."""
        return RouteRecord(
            pattern=self.pattern.pattern,
            shell_path=self.shell_path,
            params=self.params,
        )


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """One entry of the serialized route table.

    The on-disk form uses ``{"pattern", "shellPath", "params"}``.
    """

    pattern: str
    shell_path: str
    params: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "pattern": self.pattern,
            "shellPath": self.shell_path,
            "params": list(self.params),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RouteRecord:
        return cls(
            pattern=data["pattern"],
            shell_path=data["shellPath"],
            params=tuple(data["params"]),
        )


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route table lookup."""

    record: RouteRecord
    params: dict[str, str]

    @property
    def shell_path(self) -> str:
        return self.record.shell_path

"""Compiled route table shared by the edge and dev routers.

Patterns are compiled once at load time. Matching is a first-match-wins
linear scan in emission order: routes are never re-sorted, so overlapping
patterns resolve to whichever page the scan discovered first.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from typing import Any
from urllib.parse import unquote

from shellgate.routing.route import DynamicRoute, RouteMatch, RouteRecord

# A '%' not followed by two hex digits
_MALFORMED_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_component(value: str) -> str:
    """Strictly percent-decode one captured path component.

    Raises ``ValueError`` for a malformed escape or for escapes that do
    not decode as UTF-8 (``UnicodeDecodeError`` is a ``ValueError``).
    ``+`` is left alone; this is path decoding, not form decoding.
    """
    if _MALFORMED_ESCAPE_RE.search(value):
        msg = f"Malformed percent-escape in {value!r}"
        raise ValueError(msg)
    return unquote(value, errors="strict")


class RouteTable:
    """An immutable, ordered list of compiled route records.

    Usage::

        table = RouteTable.from_dicts([
            {"pattern": "^/users/([^/]+)$", "shellPath": "/users/__ACPS_id__", "params": ["id"]},
        ])
        match = table.match("/users/42")
        match.params  # {"id": "42"}
    """

    __slots__ = ("_entries",)

    def __init__(self, records: Iterable[RouteRecord] = ()) -> None:
        self._entries: tuple[tuple[re.Pattern[str], RouteRecord], ...] = tuple(
            (re.compile(record.pattern), record) for record in records
        )

    @classmethod
    def from_routes(cls, routes: Iterable[DynamicRoute]) -> RouteTable:
        return cls(route.to_record() for route in routes)

    @classmethod
    def from_dicts(cls, data: Iterable[Mapping[str, Any]]) -> RouteTable:
        """Build from the serialized ``{"pattern", "shellPath", "params"}`` form."""
        return cls(RouteRecord.from_dict(dict(item)) for item in data)

    @property
    def records(self) -> tuple[RouteRecord, ...]:
        return tuple(record for _, record in self._entries)

    def __iter__(self) -> Iterator[RouteRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self._entries)

    def match(self, path: str) -> RouteMatch | None:
        """Return the first route whose pattern matches and whose captures decode.

        A candidate with an undecodable capture is skipped, not fatal:
        scanning continues with the next route.
        """
        for regex, record in self._entries:
            found = regex.match(path)
            if found is None:
                continue
            try:
                params = {
                    name: decode_component(value)
                    for name, value in zip(record.params, found.groups())
                }
            except ValueError:
                continue
            return RouteMatch(record=record, params=params)
        return None

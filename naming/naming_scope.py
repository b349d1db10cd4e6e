"""
naming_scope.py
The set of identifiers already handed out in one bounded context: an interface's trait members,
an interface's signals, or a single argument list.
"""
from typing import Iterable, Iterator, Optional, Set


class NamingScope:
    def __init__(self, label: str = "", names: Optional[Iterable[str]] = None):
        self.label = label
        self._names: Set[str] = set(names or ())

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def add(self, name: str) -> None:
        self._names.add(name)

    def __repr__(self):
        return f"NamingScope(label={self.label!r}, names={sorted(self._names)!r})"

"""
Header Mapping Module

HTTP header names are case-insensitive, so a plain dict would happily
hold both "Cache-Control" and "cache-control". HeaderMap folds names
to lower case for comparison but remembers the spelling last used for
each name so that headers are emitted the way the caller wrote them.

Internal Storage:
    Uses OrderedDict keyed by the folded name.
    Format: folded_name -> (name, value)
"""

from collections import OrderedDict
from collections.abc import Mapping, MutableMapping
from typing import Any, Iterator, Optional, Tuple


class HeaderMap(MutableMapping):
    """
    Case-insensitive mapping of header name to value.

    Usage:
        headers = HeaderMap({"User-Agent": "demo"})
        headers["user-agent"]        # "demo"
        "USER-AGENT" in headers      # True
        headers["user-agent"] = "x"  # replaces, spelled "user-agent" now
    """

    def __init__(self, data: Optional[Mapping] = None, **kwargs: Any):
        self._items: "OrderedDict[str, Tuple[str, Any]]" = OrderedDict()
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    @staticmethod
    def _fold(name: str) -> str:
        if not isinstance(name, str):
            raise TypeError(f"Header name must be a string, got {type(name).__name__}")
        return name.lower()

    def __getitem__(self, name: str) -> Any:
        return self._items[self._fold(name)][1]

    def __setitem__(self, name: str, value: Any) -> None:
        # Existing names keep their position but take the new spelling
        self._items[self._fold(name)] = (name, value)

    def __delitem__(self, name: str) -> None:
        del self._items[self._fold(name)]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name.lower() in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        try:
            other_items = {self._fold(k): v for k, v in other.items()}
        except TypeError:
            return False
        return {k: v for k, (_, v) in self._items.items()} == other_items

    def copy(self) -> "HeaderMap":
        """Return a shallow copy."""
        return HeaderMap(self)

    def __repr__(self) -> str:
        return f"HeaderMap({dict(self.items())!r})"

"""Structured document builders.

The projector writes through the small streaming interface below, which any
nested-document writer can implement. ``DictDocumentBuilder`` assembles plain
dicts and lists, ready to be serialized as JSON or handed to an index client.
"""

import json
from typing import Any, Protocol, Self

Scalar = str | int | float | bool | None


class DocumentBuilder(Protocol):
    """Streaming writer for nested objects and arrays."""

    def start_object(self, name: str | None = None) -> Self: ...

    def end_object(self) -> Self: ...

    def start_array(self, name: str | None = None) -> Self: ...

    def end_array(self) -> Self: ...

    def field(self, name: str, value: Scalar) -> Self: ...

    def value(self, value: Scalar) -> Self: ...


class DictDocumentBuilder:
    """Builds a document as nested ``dict`` and ``list`` values.

    ``start_object``/``start_array`` take a name when opened inside an
    object and no name when opened inside an array or as the root.
    """

    def __init__(self) -> None:
        self._root: dict[str, Any] | None = None
        self._stack: list[dict[str, Any] | list[Any]] = []

    def _attach(self, name: str | None, container: dict[str, Any] | list[Any]) -> None:
        if not self._stack:
            if name is not None:
                raise ValueError("root container cannot be named")
            if self._root is not None:
                raise ValueError("document root already written")
            if not isinstance(container, dict):
                raise ValueError("document root must be an object")
            self._root = container
        else:
            parent = self._stack[-1]
            if isinstance(parent, dict):
                if name is None:
                    raise ValueError("containers inside an object need a name")
                parent[name] = container
            else:
                if name is not None:
                    raise ValueError("containers inside an array cannot be named")
                parent.append(container)
        self._stack.append(container)

    def _close(self, kind: type) -> None:
        if not self._stack or not isinstance(self._stack[-1], kind):
            raise ValueError(f"no open {kind.__name__} to end")
        self._stack.pop()

    def start_object(self, name: str | None = None) -> "DictDocumentBuilder":
        self._attach(name, {})
        return self

    def end_object(self) -> "DictDocumentBuilder":
        self._close(dict)
        return self

    def start_array(self, name: str | None = None) -> "DictDocumentBuilder":
        self._attach(name, [])
        return self

    def end_array(self) -> "DictDocumentBuilder":
        self._close(list)
        return self

    def field(self, name: str, value: Scalar) -> "DictDocumentBuilder":
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise ValueError(f"field {name!r} written outside an object")
        self._stack[-1][name] = value
        return self

    def value(self, value: Scalar) -> "DictDocumentBuilder":
        if not self._stack or not isinstance(self._stack[-1], list):
            raise ValueError("value written outside an array")
        self._stack[-1].append(value)
        return self

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def build(self) -> dict[str, Any]:
        """Return the finished document."""
        if self._root is None:
            raise ValueError("nothing has been written")
        if self._stack:
            raise ValueError(f"{len(self._stack)} container(s) still open")
        return self._root

    def to_json(self) -> str:
        """Compact JSON rendering of the finished document."""
        return json.dumps(self.build(), ensure_ascii=False, separators=(",", ":"))

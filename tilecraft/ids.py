"""Namespaced identifiers of the form ``namespace::name``."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_NAMESPACE = "default"
SEPARATOR = "::"


class InvalidIdError(ValueError):
    """Raised when an identifier read from data is incomplete."""


def split_namespace(text: str) -> tuple[str, str]:
    """Split ``text`` into namespace and name; the namespace defaults to ``default``."""
    if not text:
        return "", ""
    namespace, sep, name = text.partition(SEPARATOR)
    if sep:
        return namespace, name
    return DEFAULT_NAMESPACE, text


@dataclass(frozen=True, order=True)
class Id:
    """An identifier ordered by namespace, then name."""

    namespace: str = ""
    name: str = ""

    @classmethod
    def parse(cls, text: str) -> Id:
        return cls(*split_namespace(text))

    @classmethod
    def from_json(cls, text: str) -> Id:
        """Parse an identifier from data, rejecting empty parts."""
        namespace, name = split_namespace(text)
        if not name:
            raise InvalidIdError("id has empty name")
        if not namespace:
            raise InvalidIdError("id has no namespace")
        return cls(namespace, name)

    def __str__(self) -> str:
        return f"{self.namespace}{SEPARATOR}{self.name}"


NULL_ID = Id()
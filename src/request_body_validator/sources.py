"""Providers of the decoded request body the validator reads from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class ParsedBodySource(Protocol):
    """Anything that can hand over an already-decoded request body."""

    def get_parsed_body(self) -> object:
        """Return the decoded body, or ``None`` when the request has none."""


@dataclass(frozen=True, slots=True)
class StaticBodySource:
    """Source wrapping a body that has already been decoded elsewhere."""

    body: object = None

    def get_parsed_body(self) -> object:
        return self.body

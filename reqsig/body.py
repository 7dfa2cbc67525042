"""
Request bodies.

A body is one of ``EmptyBody``, ``TextBody`` or ``JsonBody``; each knows how
to render itself to the exact text that is hashed and sent.
"""
import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class EmptyBody:
    def render(self) -> str:
        return ''


@dataclass(frozen=True)
class TextBody:
    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class JsonBody:
    value: Any

    def render(self) -> str:
        return json.dumps(self.value, separators=(',', ':'))


Body = Union[EmptyBody, TextBody, JsonBody]

EMPTY = EmptyBody()

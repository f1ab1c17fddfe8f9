"""Tree node types produced by the tree builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from stonescript.tokens import Token


@dataclass(frozen=True, slots=True)
class Command:
    """A ``/ ... ;`` span: the tokens between the divide and the terminator."""

    type: ClassVar[str] = "command"

    value: tuple[Token, ...]


# Only one statement shape is recognized so far
Node = Command

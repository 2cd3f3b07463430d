# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Literal, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful API interaction carrying the parsed payload."""

    data: T
    status: Literal["ok"] = "ok"

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """
    Failed API interaction.

    `data` is the server's `detail` message when it sent one, otherwise the
    text of the underlying error. The exception itself (if any) is kept on
    `error` for callers that want to inspect it.
    """

    data: str
    error: Optional[BaseException] = field(default=None, compare=False, repr=False)
    status: Literal["err"] = "err"

    @property
    def ok(self) -> bool:
        return False


ShieldResponse = Union[Ok[T], Err]

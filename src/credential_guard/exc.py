import pathlib
from dataclasses import dataclass
from typing import NotRequired, TypedDict

from typing_extensions import override

__all__ = ("ApplicationError", "Location")


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None = None

    def format_message(self) -> str:
        if not self.ctx:
            return self.message
        return self.message.format(ctx=self.ctx)

    @override
    def __str__(self) -> str:
        return self.format_message()


class Location(TypedDict):
    filename: pathlib.Path
    line: NotRequired[int]
    col: NotRequired[int]

import enum

__all__ = ("ValidationState",)


class ValidationState(enum.IntFlag):
    """
    Encodes whether a credential is valid and, if not, every way in which it fails.

    Several flags may be set at once, e.g. a password can be too short and lack
    every required character class at the same time. ``VALID`` is the empty set.
    """

    VALID = 0
    TOO_SHORT = enum.auto()
    TOO_LONG = enum.auto()
    INVALID_SYMBOL = enum.auto()
    TOO_FEW_LOWERCASE = enum.auto()
    TOO_FEW_UPPERCASE = enum.auto()
    TOO_FEW_DIGITS = enum.auto()
    TOO_FEW_SYMBOLS = enum.auto()

    @property
    def flags(self) -> tuple["ValidationState", ...]:
        """The individual flags that are set, in declaration order."""
        return tuple(flag for flag in ValidationState if flag and flag in self)

    @property
    def label(self) -> str:
        """CamelCase name of a single flag, e.g. ``TooFewDigits``."""
        return "".join(part.capitalize() for part in (self.name or "").split("_"))

import pydantic
import pydantic_core

CUSTOM_TYPES = {
    "model_type": "mapping_type",
    "dataclass_type": "mapping_type",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/#model_type
    "mapping_type": "Input should be a valid mapping",
    "greater_than_equal": "Input should be a non-negative integer",
}


def convert_errors(
    ex: pydantic.ValidationError,
    custom_messages: dict[str, str] = CUSTOM_MESSAGES,
    custom_types: dict[str, str] = CUSTOM_TYPES,
) -> list[pydantic_core.ErrorDetails]:
    new_errors: list[pydantic_core.ErrorDetails] = []
    for error in ex.errors(include_url=False):
        ctx = error.get("ctx")

        if custom_type := custom_types.get(error["type"]):
            error["type"] = custom_type
        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message.format(**ctx) if ctx else custom_message
        if ctx:
            del error["ctx"]

        new_errors.append(error)
    return new_errors


def format_errors(ex: pydantic.ValidationError) -> str:
    """Renders converted errors one per line as ``loc.path: message``."""
    lines = []
    for error in convert_errors(ex):
        loc = ".".join(str(part) for part in error["loc"]) or "<root>"
        lines.append("%s: %s" % (loc, error["msg"]))
    return "\n".join(lines)

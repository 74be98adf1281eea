"""Validate command output against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ._output_schemas import get_output_schema


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Check the output of ``reporttime.api.<domain>.cmd_<name>`` against its schema.

    Returns:
        The output dict as dumped by the schema

    Raises:
        ValueError: If no schema is registered for the command or the output does not match it
    """
    domain = func.__module__.split(".")[2]
    command_name = func.__name__.removeprefix("cmd_")

    schema_class = get_output_schema(domain, command_name)
    if schema_class is None:
        raise ValueError(f"No output schema registered for {domain}.{command_name}")

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        raise ValueError(f"Output of {domain}.{command_name} does not match {schema_class.__name__}: {e}") from e

"""Input schemas for thread and comment submission."""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Annotated, Any, Generic, Mapping, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

MIN_THREAD_LENGTH = 3


def _check_thread_length(v: str) -> str:
    # Covers the empty string too
    if len(v) < MIN_THREAD_LENGTH:
        raise PydanticCustomError(
            "string_too_short", f"Minimum {MIN_THREAD_LENGTH} characters"
        )
    return v


ThreadText = Annotated[str, AfterValidator(_check_thread_length)]


class ThreadValidation(BaseModel):
    """New top-level thread."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    thread: ThreadText
    account_id: str = Field(alias="accountId", min_length=1)


class CommentValidation(BaseModel):
    """Reply to an existing thread."""

    model_config = ConfigDict(frozen=True)

    thread: ThreadText


T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Either a typed value or the messages for each failing field."""

    value: T | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.value is not None


def validate(schema: type[T], data: Mapping[str, Any]) -> ValidationResult[T]:
    """Validate ``data`` against ``schema`` without raising.

    Keys not declared on the schema are dropped from the value.

    Args:
        schema: Pydantic model class to validate against
        data: Raw input, e.g. a submitted form

    Returns:
        ValidationResult with either ``value`` or ``errors`` set
    """
    try:
        return ValidationResult(value=schema.model_validate(dict(data)))
    except PydanticValidationError as e:
        errors: dict[str, list[str]] = defaultdict(list)
        for error in e.errors():
            loc = ".".join(str(part) for part in error["loc"]) or "__root__"
            errors[loc].append(error["msg"])
        return ValidationResult(errors=dict(errors))

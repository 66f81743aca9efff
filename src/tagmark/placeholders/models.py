"""Data models for placeholder resolution."""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, StrictStr

T = TypeVar("T")


class ReplacementType(str, Enum):
    """How the consuming engine should treat a replacement payload."""

    COMPONENT = "component"  # Already-built output node, inserted as-is
    MINI_MESSAGE = "mini_message"  # Markup text, parsed by the engine before insertion
    RAW = "raw"  # Literal text, inserted without parsing


class Replacement(BaseModel, Generic[T]):
    """An opaque substitution payload.

    The resolver machinery only carries replacements around; the ``type``
    tag tells the consumer how to interpret ``value``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: ReplacementType
    value: T

    @classmethod
    def component(cls, value: Any) -> "Replacement":
        return cls(type=ReplacementType.COMPONENT, value=value)

    @classmethod
    def mini_message(cls, text: str) -> "Replacement":
        return cls(type=ReplacementType.MINI_MESSAGE, value=text)

    @classmethod
    def raw(cls, text: str) -> "Replacement":
        return cls(type=ReplacementType.RAW, value=text)


class Placeholder(BaseModel):
    """A key paired with the replacement it stands for."""

    model_config = ConfigDict(frozen=True)

    key: StrictStr
    replacement: Replacement

    @classmethod
    def component(cls, key: str, value: Any) -> "Placeholder":
        return cls(key=key, replacement=Replacement.component(value))

    @classmethod
    def mini_message(cls, key: str, text: str) -> "Placeholder":
        return cls(key=key, replacement=Replacement.mini_message(text))

    @classmethod
    def raw(cls, key: str, text: str) -> "Placeholder":
        return cls(key=key, replacement=Replacement.raw(text))

    @property
    def type(self) -> ReplacementType:
        return self.replacement.type

    @property
    def value(self) -> Any:
        return self.replacement.value


class ResolverArgumentError(TypeError):
    """Exception raised when a resolver is built from invalid arguments."""

    pass

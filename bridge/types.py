# =============================================================================
# bridge/types.py - Core Types
# =============================================================================
# Defines the types shared across the transform library:
# - Transform: the string -> string callable every operation works with
# - Ok / Err: the two-variant result returned by validated transforms
# - BridgeConfig: the name/version record read by info()
# - ParamDef / TransformInfo: metadata attached to registered transforms
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from pydantic import BaseModel, ConfigDict, Field


# A transform maps a string to a string
Transform = Callable[[str], str]


# =============================================================================
# Result
# =============================================================================

@dataclass(frozen=True)
class Ok:
    """Success variant carrying the transformed string."""
    value: str

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False


@dataclass(frozen=True)
class Err:
    """Failure variant carrying a human-readable message."""
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True


Result = Union[Ok, Err]


# =============================================================================
# Configuration Record
# =============================================================================

class BridgeConfig(BaseModel):
    """
    Name and version of a bridge.

    Both fields are free-form strings. The record is frozen once built.

    Example:
        config = BridgeConfig(name="custom", version="1.0.0")
        info(config)  # "custom v1.0.0"
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Display name of the bridge"
    )

    version: str = Field(
        ...,
        description="Version string, reported as-is"
    )


DEFAULT_CONFIG = BridgeConfig(name="bridge", version="0.1.0")


# =============================================================================
# Transform Metadata
# =============================================================================

@dataclass
class ParamDef:
    """
    Definition of a transform factory parameter.

    Used for validation and documentation.
    """
    name: str
    type: type | str = "str"
    required: bool = True
    default: Any = None
    description: str = ""

    def validate(self, value: Any) -> tuple[bool, str]:
        """Validate a value against this parameter definition."""
        if value is None:
            if self.required:
                return False, f"Parameter '{self.name}' is required"
            return True, ""

        if self.type == "str" and not isinstance(value, str):
            return False, f"Parameter '{self.name}' must be a string"

        return True, ""


@dataclass
class TransformInfo:
    """
    Metadata about a registered transform.

    A transform with no params is used as-is; one with params is a factory
    that is called with those params to build the transform.
    """
    name: str
    category: str
    description: str
    params: list[ParamDef] = field(default_factory=list)

    @property
    def is_factory(self) -> bool:
        return len(self.params) > 0

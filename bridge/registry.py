# =============================================================================
# bridge/registry.py - Transform Registry
# =============================================================================
# Centralized registry of named transforms and transform factories.
# Provides lookup, listing, info retrieval and documentation export.
#
# Example:
#   @register_transform(name="uppercase", category="text",
#                       description="Convert every character to uppercase")
#   def uppercase(text: str) -> str:
#       return text.upper()
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from bridge.exceptions import (
    DuplicateTransformError,
    InvalidParamsError,
    UnknownTransformError,
)
from bridge.types import ParamDef, Transform, TransformInfo


@dataclass
class RegisteredTransform:
    """A registry entry: the callable plus its metadata."""
    func: Callable[..., Any]
    info: TransformInfo


# Global registry: name -> RegisteredTransform
TRANSFORM_REGISTRY: dict[str, RegisteredTransform] = {}


def register_transform(
    name: str,
    category: str,
    description: str,
    params: list[ParamDef] | None = None,
):
    """
    Decorator to register a transform or transform factory.

    Usage:
        @register_transform(name="prefix", category="affix",
                            description="Prepend a fixed string",
                            params=[ParamDef(name="pre")])
        def prefix(pre: str) -> Transform:
            ...

    The function is returned unchanged.
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in TRANSFORM_REGISTRY:
            raise DuplicateTransformError(name)

        TRANSFORM_REGISTRY[name] = RegisteredTransform(
            func=func,
            info=TransformInfo(
                name=name,
                category=category,
                description=description,
                params=list(params or []),
            ),
        )
        return func
    return decorator


def get_transform(name: str) -> RegisteredTransform | None:
    """Get a registry entry by name."""
    return TRANSFORM_REGISTRY.get(name)


def list_transforms(category: str | None = None) -> list[str]:
    """
    List all registered transform names.

    Args:
        category: If provided, filter by category (e.g., "text", "affix")
    """
    if category is None:
        return list(TRANSFORM_REGISTRY.keys())

    return [
        name for name, entry in TRANSFORM_REGISTRY.items()
        if entry.info.category == category
    ]


def get_transform_info(name: str) -> TransformInfo | None:
    """Get metadata about a transform."""
    entry = TRANSFORM_REGISTRY.get(name)
    if entry is None:
        return None
    return entry.info


def validate_params(name: str, params: dict[str, Any] | None) -> tuple[bool, list[str]]:
    """Validate parameters against a transform's param definitions."""
    params = params or {}
    entry = TRANSFORM_REGISTRY.get(name)
    if entry is None:
        return False, [f"Unknown transform '{name}'"]

    errors = []
    for param_def in entry.info.params:
        value = params.get(param_def.name, param_def.default)
        valid, error = param_def.validate(value)
        if not valid:
            errors.append(error)

    known = {p.name for p in entry.info.params}
    for key in params:
        if key not in known:
            errors.append(f"Unexpected parameter '{key}'")

    return len(errors) == 0, errors


def build_transform(name: str, params: dict[str, Any] | None = None) -> Transform:
    """
    Resolve a registered name to a concrete transform.

    Plain transforms are returned as-is; factories are called with params.

    Raises:
        UnknownTransformError: name isn't registered
        InvalidParamsError: params don't match the definitions
    """
    params = params or {}
    entry = TRANSFORM_REGISTRY.get(name)
    if entry is None:
        raise UnknownTransformError(name, available=list_transforms())

    valid, errors = validate_params(name, params)
    if not valid:
        raise InvalidParamsError(name, errors)

    if not entry.info.is_factory:
        return entry.func

    kwargs = {
        p.name: params.get(p.name, p.default)
        for p in entry.info.params
    }
    return entry.func(**kwargs)


def export_transforms_documentation() -> str:
    """Export documentation for all transforms in markdown format."""
    lines = ["# Bridge Transform Library\n"]

    # Group by category
    categories: dict[str, list[str]] = {}
    for name, entry in TRANSFORM_REGISTRY.items():
        categories.setdefault(entry.info.category, []).append(name)

    for category, names in sorted(categories.items()):
        lines.append(f"\n## {category.upper()}\n")

        for name in sorted(names):
            info = TRANSFORM_REGISTRY[name].info
            lines.append(f"\n### `{name}`\n")
            lines.append(f"{info.description}\n")

            if info.params:
                lines.append("\n**Parameters:**\n")
                for p in info.params:
                    req = "(required)" if p.required else f"(default: {p.default})"
                    lines.append(f"- `{p.name}`: {p.type} {req} - {p.description}")

    return "\n".join(lines)

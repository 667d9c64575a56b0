# =============================================================================
# bridge/transforms.py - Transform Library
# =============================================================================
# Pure string -> string transforms and the ways to combine them.
#
# Every function here is total and side-effect free. The one validation
# branch (empty input) is returned as an Err value, never raised.
#
# Usage:
#   from bridge.transforms import compose, prefix, suffix
#
#   greet = compose(prefix("hello-"), suffix("-world"))
#   greet("test")  # "hello-test-world"
# =============================================================================

from __future__ import annotations

from functools import reduce

from bridge.registry import register_transform
from bridge.types import BridgeConfig, Err, Ok, ParamDef, Result, Transform


TAG = "[bridge] "

EMPTY_INPUT_MESSAGE = "Input cannot be empty"


@register_transform(
    name="transform",
    category="text",
    description="Prefix the input with the [bridge] tag",
)
def transform(text: str) -> str:
    """Return ``text`` prefixed with ``"[bridge] "``."""
    return TAG + text


def transform_safe(text: str) -> Result:
    """
    Like transform(), but rejects the empty string.

    Returns:
        Err("Input cannot be empty") for "", otherwise Ok(transform(text))
    """
    if text == "":
        return Err(EMPTY_INPUT_MESSAGE)
    return Ok(transform(text))


def compose(f: Transform, g: Transform) -> Transform:
    """
    Combine two transforms, applying f first and then g.

    Note the left-to-right order: compose(f, g)(x) == g(f(x)).
    """
    def composed(text: str) -> str:
        return g(f(text))
    return composed


def compose_all(*transforms: Transform) -> Transform:
    """Compose any number of transforms left-to-right. No arguments gives identity."""
    return reduce(compose, transforms, identity)


@register_transform(
    name="identity",
    category="text",
    description="Return the input unchanged",
)
def identity(text: str) -> str:
    return text


@register_transform(
    name="uppercase",
    category="text",
    description="Convert every character to uppercase",
)
def uppercase(text: str) -> str:
    return text.upper()


@register_transform(
    name="prefix",
    category="affix",
    description="Prepend a fixed string",
    params=[ParamDef(name="pre", description="Text to prepend")],
)
def prefix(pre: str) -> Transform:
    """Build a transform that prepends ``pre``."""
    def add_prefix(text: str) -> str:
        return pre + text
    return add_prefix


@register_transform(
    name="suffix",
    category="affix",
    description="Append a fixed string",
    params=[ParamDef(name="suf", description="Text to append")],
)
def suffix(suf: str) -> Transform:
    """Build a transform that appends ``suf``."""
    def add_suffix(text: str) -> str:
        return text + suf
    return add_suffix


def info(config: BridgeConfig) -> str:
    """Format a config as ``"<name> v<version>"``."""
    return f"{config.name} v{config.version}"

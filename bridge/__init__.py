# =============================================================================
# bridge - Composable String Transforms
# =============================================================================
# A small library of pure string -> string transforms.
#
# Key principles:
# - Every transform is deterministic (same input = same output)
# - compose(f, g) applies f first, then g
# - The only failure is an empty input to transform_safe(), returned as Err
#
# Usage:
#   from bridge import compose, prefix, suffix, transform_safe
#
#   compose(prefix("hello-"), suffix("-world"))("test")  # "hello-test-world"
#   transform_safe("")  # Err(message="Input cannot be empty")
# =============================================================================

from bridge.types import (
    DEFAULT_CONFIG,
    BridgeConfig,
    Err,
    Ok,
    Result,
    Transform,
)
from bridge.transforms import (
    compose,
    compose_all,
    identity,
    info,
    prefix,
    suffix,
    transform,
    transform_safe,
    uppercase,
)
from bridge.registry import (
    TRANSFORM_REGISTRY,
    build_transform,
    export_transforms_documentation,
    get_transform,
    get_transform_info,
    list_transforms,
    register_transform,
)
from bridge.engine import Engine, ExecutionResult
from bridge.exceptions import BridgeException
from bridge.config import get_settings, setup_logging

__version__ = "0.1.0"

__all__ = [
    # Types
    "DEFAULT_CONFIG",
    "BridgeConfig",
    "Err",
    "Ok",
    "Result",
    "Transform",
    # Transforms
    "compose",
    "compose_all",
    "identity",
    "info",
    "prefix",
    "suffix",
    "transform",
    "transform_safe",
    "uppercase",
    # Registry
    "TRANSFORM_REGISTRY",
    "build_transform",
    "export_transforms_documentation",
    "get_transform",
    "get_transform_info",
    "list_transforms",
    "register_transform",
    # Engine
    "Engine",
    "ExecutionResult",
    # Errors & settings
    "BridgeException",
    "get_settings",
    "setup_logging",
]

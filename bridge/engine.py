# =============================================================================
# bridge/engine.py - Plan Execution Engine
# =============================================================================
# Executes plans (ordered lists of registered transforms) on strings and on
# pandas text columns. Steps run left-to-right, exactly like compose().
# =============================================================================

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from bridge.exceptions import BridgeException
from bridge.registry import build_transform, get_transform_info, validate_params
from bridge.transforms import EMPTY_INPUT_MESSAGE, compose_all
from bridge.types import Err, Ok, Result, Transform

logger = logging.getLogger(__name__)


def _is_null(value: Any) -> bool:
    """Scalar null check; pd.isna() returns an array for list-valued cells."""
    return pd.api.types.is_scalar(value) and pd.isna(value)


@dataclass
class StepResult:
    """Result of executing a single step in a plan."""
    step_index: int
    operation: str
    params: dict[str, Any]
    input: str
    output: str
    duration_ms: float = 0.0


@dataclass
class ExecutionResult:
    """
    Result of executing an entire plan.

    On failure, output is the original input and error_step points at the
    step that failed.
    """
    success: bool
    output: str | None = None
    steps: list[StepResult] = field(default_factory=list)
    error: str | None = None
    error_step: int | None = None
    skipped_steps: list[int] = field(default_factory=list)
    total_duration_ms: float = 0.0

    def to_result(self) -> Result:
        """Collapse into the Ok / Err result union."""
        if self.success and self.output is not None:
            return Ok(self.output)
        return Err(self.error or "Execution failed")


class Engine:
    """
    Execution engine for transform plans.

    A plan is a list of operations:
        [
            {"op": "prefix", "params": {"pre": "hello-"}},
            {"op": "suffix", "params": {"suf": "-world"}},
            {"op": "uppercase"},
        ]

    Usage:
        engine = Engine()
        result = engine.execute("test", plan)

        if result.success:
            print(result.output)  # "HELLO-TEST-WORLD"
        else:
            print(f"Failed at step {result.error_step}: {result.error}")
    """

    def __init__(self, stop_on_error: bool = True):
        """
        Initialize the engine.

        Args:
            stop_on_error: If True, stop execution on the first bad step.
                          If False, skip bad steps and continue.
        """
        self.stop_on_error = stop_on_error

    def build(self, plan: list[dict[str, Any]]) -> Transform:
        """
        Compile a plan into a single composed transform.

        Raises:
            BridgeException: if any step is malformed, unknown or has bad params
        """
        transforms = []
        for i, step in enumerate(plan):
            op_name = step.get("op")
            if not op_name:
                raise BridgeException(
                    message=f"Step {i}: Missing 'op' key",
                    code="INVALID_PLAN",
                    suggestion="Every step needs an 'op' naming a registered transform",
                    details={"step": i},
                )
            transforms.append(build_transform(op_name, step.get("params") or {}))
        return compose_all(*transforms)

    def execute(self, text: str, plan: list[dict[str, Any]]) -> ExecutionResult:
        """
        Execute a plan on a string.

        Args:
            text: Input string
            plan: List of operations, each with "op" and optional "params" keys

        Returns:
            ExecutionResult with success/failure, final output, and step details
        """
        start_time = time.time()
        current = text
        steps: list[StepResult] = []
        skipped: list[int] = []

        for i, step in enumerate(plan):
            step_start = time.time()
            op_name = step.get("op")
            params = step.get("params") or {}

            try:
                if not op_name:
                    raise BridgeException(
                        message="Missing 'op' key",
                        code="INVALID_PLAN",
                        details={"step": i},
                    )
                func = build_transform(op_name, params)
            except BridgeException as e:
                error = f"Step {i}: {e.message}"
                if self.stop_on_error:
                    logger.warning("Plan failed at step %d: %s", i, e.message)
                    return ExecutionResult(
                        success=False,
                        output=text,
                        steps=steps,
                        error=error,
                        error_step=i,
                        skipped_steps=skipped,
                        total_duration_ms=(time.time() - start_time) * 1000,
                    )
                logger.warning("Skipping step %d: %s", i, e.message)
                skipped.append(i)
                continue

            # Execute the step
            try:
                output = func(current)
            except Exception as e:
                error = f"Step {i}: {e}"
                if self.stop_on_error:
                    logger.warning("Transform '%s' raised at step %d: %s", op_name, i, e)
                    return ExecutionResult(
                        success=False,
                        output=text,
                        steps=steps,
                        error=error,
                        error_step=i,
                        skipped_steps=skipped,
                        total_duration_ms=(time.time() - start_time) * 1000,
                    )
                logger.warning("Skipping step %d after '%s' raised: %s", i, op_name, e)
                skipped.append(i)
                continue

            steps.append(StepResult(
                step_index=i,
                operation=op_name,
                params=params,
                input=current,
                output=output,
                duration_ms=(time.time() - step_start) * 1000,
            ))
            current = output

        total_duration = (time.time() - start_time) * 1000
        logger.debug(
            "Executed %d steps (%d skipped) in %.2fms",
            len(steps), len(skipped), total_duration,
        )

        return ExecutionResult(
            success=True,
            output=current,
            steps=steps,
            skipped_steps=skipped,
            total_duration_ms=total_duration,
        )

    def execute_safe(self, text: str, plan: list[dict[str, Any]]) -> Result:
        """
        Execute a plan, rejecting empty input the way transform_safe() does.

        Returns:
            Err("Input cannot be empty") for "", Err(error) if the plan
            fails, otherwise Ok(output)
        """
        if text == "":
            return Err(EMPTY_INPUT_MESSAGE)
        return self.execute(text, plan).to_result()

    def execute_series(self, series: pd.Series, plan: list[dict[str, Any]]) -> pd.Series:
        """
        Apply a plan to every value of a text column.

        Null values stay null; everything else is converted to str first.

        Raises:
            BridgeException: if the plan can't be built
        """
        func = self.build(plan)
        result = series.map(lambda value: value if _is_null(value) else func(str(value)))
        logger.debug("Applied %d-step plan to %d values", len(plan), int(series.notna().sum()))
        return result

    def validate_plan(self, plan: list[dict[str, Any]]) -> tuple[bool, list[str]]:
        """
        Validate a plan without executing it.

        Returns:
            Tuple of (is_valid, list_of_errors)
        """
        errors = []

        for i, step in enumerate(plan):
            op_name = step.get("op")
            params = step.get("params") or {}

            if not op_name:
                errors.append(f"Step {i}: Missing 'op' key")
                continue

            if get_transform_info(op_name) is None:
                errors.append(f"Step {i}: Unknown transform '{op_name}'")
                continue

            valid, param_errors = validate_params(op_name, params)
            if not valid:
                for err in param_errors:
                    errors.append(f"Step {i}: {err}")

        return len(errors) == 0, errors

    def dry_run(self, text: str, plan: list[dict[str, Any]]) -> dict[str, Any]:
        """
        Describe what a plan would do without executing it.

        Returns:
            Dict with plan validity, errors and a per-step summary
        """
        valid, errors = self.validate_plan(plan)

        summary = {
            "valid": valid,
            "errors": errors,
            "steps": [],
            "input": text,
        }

        for i, step in enumerate(plan):
            op_name = step.get("op", "unknown")
            params = step.get("params") or {}

            info = get_transform_info(op_name)
            if info:
                summary["steps"].append({
                    "index": i,
                    "operation": op_name,
                    "description": info.description,
                    "params": params,
                })
            else:
                summary["steps"].append({
                    "index": i,
                    "operation": op_name,
                    "error": f"Unknown transform '{op_name}'",
                })

        return summary

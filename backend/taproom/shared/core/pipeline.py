"""
Orchestration Pipeline

Runs a multi-step write (or read) as an ordered list of named stages.

Execution Model:
================
    Pipeline("manufacturer.create")
        .stage("authorize", ...)        ← sync or async callable
        .stage("validate", ...)
        .stage("check_uniqueness", ...)
        .stage("create_account", ...)
        .stage("create_manufacturer", ...)
        .stage("respond", ...)
        .run()

- Stages run strictly in declaration order; a stage never starts before the
  previous stage's result is available.
- Each stage receives the PipelineContext, which holds the caller's inputs
  and the result of every completed stage keyed by stage name.
- The first stage that raises aborts the pipeline. The exception propagates
  unchanged; nothing is compensated here. Rollback belongs to the session
  that wraps the request (see taproom.shared.db.session.get_db).
- Cancellation (asyncio.CancelledError) is not intercepted.

The value returned by the last stage is the pipeline result.
"""

import inspect
from dataclasses import dataclass
from typing import Any, Callable

from taproom.shared.core.exceptions import CatalogException
from taproom.shared.core.logging import get_logger


StageFn = Callable[["PipelineContext"], Any]


class PipelineContext:
    """
    State shared by the stages of one pipeline run.

    Example:
        ctx["load"]          # result of the stage named "load"
        ctx.inputs["data"]   # value passed to Pipeline.run(data=...)
    """

    def __init__(self, inputs: dict[str, Any]) -> None:
        self.inputs = inputs
        self.results: dict[str, Any] = {}

    def __getitem__(self, stage_name: str) -> Any:
        return self.results[stage_name]

    def __contains__(self, stage_name: str) -> bool:
        return stage_name in self.results


@dataclass(frozen=True)
class Stage:
    """A named step of a pipeline."""

    name: str
    fn: StageFn


class Pipeline:
    """
    Fail-fast sequence of dependent stages.

    Attributes:
        operation: Name used in logs, e.g. "beer.update"
        stages: Stages in execution order
    """

    def __init__(self, operation: str, **log_fields: Any) -> None:
        self.operation = operation
        self.stages: list[Stage] = []
        self._log = get_logger("taproom.pipeline").bind(operation=operation, **log_fields)

    def stage(self, name: str, fn: StageFn) -> "Pipeline":
        """
        Append a stage.

        Args:
            name: Unique stage name; its result is stored under this key
            fn: Callable taking the PipelineContext. May return an awaitable.

        Returns:
            The pipeline itself, so stages can be chained
        """
        if any(existing.name == name for existing in self.stages):
            raise ValueError(f"Duplicate stage name: {name}")
        self.stages.append(Stage(name=name, fn=fn))
        return self

    async def run(self, **inputs: Any) -> Any:
        """
        Execute all stages in order.

        Args:
            **inputs: Values made available as ctx.inputs

        Returns:
            Result of the last stage (None for an empty pipeline)

        Raises:
            Whatever the failing stage raised
        """
        ctx = PipelineContext(inputs)
        result: Any = None

        for stage in self.stages:
            try:
                result = stage.fn(ctx)
                if inspect.isawaitable(result):
                    result = await result
            except CatalogException as exc:
                self._log.warning(
                    "Pipeline stage rejected",
                    stage=stage.name,
                    error_code=exc.error_code,
                    message=exc.message,
                    reason=exc.details.get("reason"),
                )
                raise
            except Exception as exc:
                self._log.error(
                    "Pipeline stage failed",
                    stage=stage.name,
                    error_type=type(exc).__name__,
                    exc_info=True,
                )
                raise

            ctx.results[stage.name] = result

        self._log.debug("Pipeline completed", stages=[s.name for s in self.stages])
        return result

"""Compensating-action saga for operations that span separate stores."""

import logging
from typing import Awaitable, Callable, List, Optional, Tuple, TypeVar

logger = logging.getLogger("app")

T = TypeVar("T")

Compensation = Callable[[], Awaitable[None]]


class SagaStepError(Exception):
    """Raised when a saga step fails; carries the failing step name and cause."""

    def __init__(self, step: str, cause: BaseException):
        self.step = step
        self.cause = cause
        super().__init__(f"Saga step '{step}' failed: {cause}")


class Saga:
    """
    Run ordered steps, remembering a compensating action for each completed one.

    When a step raises, `on_failure` runs first (e.g. a session rollback), then
    the compensations registered so far are executed in reverse order and a
    single SagaStepError is raised to the caller.

    Examples:
        >>> saga = Saga("signup")
        >>> identity = await saga.run("identity", create_identity, compensate=delete_identity)
    """

    def __init__(self, name: str, on_failure: Optional[Compensation] = None):
        self.name = name
        self.on_failure = on_failure
        self._compensations: List[Tuple[str, Compensation]] = []

    async def run(
        self,
        step: str,
        action: Callable[[], Awaitable[T]],
        compensate: Optional[Callable[[T], Awaitable[None]]] = None,
    ) -> T:
        """
        Execute one step of the saga.

        Args:
            step: Name used in logs and in the raised SagaStepError.
            action: Coroutine factory performing the step.
            compensate: Optional coroutine factory undoing the step, called
                with the step's result.

        Returns:
            The value produced by the action.

        Raises:
            SagaStepError: If the action fails. Compensations have already run.
        """
        try:
            result = await action()
        except Exception as exc:
            logger.error("Saga %s failed at step=%s: %s", self.name, step, exc, exc_info=True)
            if self.on_failure is not None:
                await self.on_failure()
            await self.compensate()
            raise SagaStepError(step, exc) from exc

        if compensate is not None:
            self._compensations.append((step, lambda: compensate(result)))
        return result

    async def compensate(self) -> None:
        """Run registered compensations in reverse order, logging any that fail."""
        while self._compensations:
            step, undo = self._compensations.pop()
            try:
                await undo()
                logger.info("Saga %s compensated step=%s", self.name, step)
            except Exception as exc:
                logger.error(
                    "Saga %s could not compensate step=%s: %s",
                    self.name,
                    step,
                    exc,
                    exc_info=True,
                )

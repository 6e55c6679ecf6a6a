"""Pipeline step tracking."""

from collections.abc import Callable

from hoi4_radio.constants import STEP_DONE


class StepTracker:
    """Records which generation step is running.

    Observers outside the generator (CLI progress, resumable callers) read
    ``current_step`` or subscribe with ``on_step``. After a failed run,
    ``current_step`` is the step that raised.
    """

    def __init__(self, on_step: Callable[[str], None] | None = None):
        self.on_step = on_step
        self.current_step: str | None = None
        self.history: list[str] = []

    async def set_current_step(self, step: str) -> None:
        self.current_step = step
        self.history.append(step)
        if self.on_step:
            self.on_step(step)

    @property
    def finished(self) -> bool:
        return self.current_step == STEP_DONE

"""Fake Prompter implementation for testing.

FakePrompter answers prompts from a scripted list of selections, enabling
fast and deterministic tests.
"""

from dataclasses import dataclass

from prdispatch.core.errors import UserCancelled
from prdispatch.gateway.prompt.abc import Prompter


@dataclass(frozen=True)
class RecordedPrompt:
    """A prompt presented to FakePrompter."""

    prompt: str
    options: list[str]
    default: int


class FakePrompter(Prompter):
    """In-memory fake that returns scripted selections in order.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, selections: list[int] | None = None, cancel: bool = False) -> None:
        """Create FakePrompter with scripted answers.

        Args:
            selections: Zero-based answers, consumed one per prompt. When the
                list runs out, the prompt's default is returned.
            cancel: If True, every prompt raises UserCancelled
        """
        self._selections = list(selections) if selections is not None else []
        self._cancel = cancel
        self._prompts: list[RecordedPrompt] = []

    def select(self, prompt: str, options: list[str], *, default: int) -> int:
        self._prompts.append(RecordedPrompt(prompt=prompt, options=list(options), default=default))
        if self._cancel:
            raise UserCancelled()
        if not self._selections:
            return default
        return self._selections.pop(0)

    @property
    def prompts(self) -> list[RecordedPrompt]:
        """Read-only access to presented prompts for test assertions."""
        return self._prompts

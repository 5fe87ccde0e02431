"""Abstract interactive selection prompt.

This module provides an ABC for single-choice menus to enable fast tests
that don't rely on an interactive terminal.
"""

from abc import ABC, abstractmethod


class Prompter(ABC):
    """Abstract single-choice selection prompt for dependency injection."""

    @abstractmethod
    def select(self, prompt: str, options: list[str], *, default: int) -> int:
        """Present options and block until the user picks one.

        Args:
            prompt: Question shown above the options
            options: Non-empty list of option labels, displayed in order
            default: Zero-based index preselected when the user just hits enter

        Returns:
            Zero-based index of the chosen option

        Raises:
            UserCancelled: If the user aborts the prompt
        """
        ...

from abc import ABC, abstractmethod


class BaseHost(ABC):
    """Contract for the shell that owns the process.

    The orchestrator reports a failure at most once and always terminates
    through the host at the end of a run.
    """

    @abstractmethod
    def report(self, title: str, message: str) -> None:
        """Surface a failure to the operator."""

    @abstractmethod
    def terminate(self, exit_code: int) -> None:
        """End the process with `exit_code`."""

"""Base abstraction for the language-generation service.

The planner only needs one capability from a model: turn instructions plus user text into a single text
payload. Implementations wrap a real client; tests substitute a deterministic stub.
"""

from abc import ABC, abstractmethod


class PlanOracle(ABC):
    """Abstract base class for language-generation backends."""

    @abstractmethod
    def generate(self, instructions: str, user_text: str) -> str:
        """Return the raw text the model produced for the instructions and user text.

        Raises OracleUnavailableError when the service cannot be reached or fails outright.
        """

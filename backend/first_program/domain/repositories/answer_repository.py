from abc import ABC, abstractmethod
from typing import Tuple


class AnswerRepository(ABC):
    """Source of the oracle's possible answers."""

    @abstractmethod
    def all_answers(self) -> Tuple[str, ...]:
        """Return every possible answer, in a stable order.

        The returned tuple is immutable; callers cannot alter later results.
        """
        raise NotImplementedError

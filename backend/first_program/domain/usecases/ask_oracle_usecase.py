import logging
import random
import threading
from datetime import datetime, timezone
from typing import Optional, Tuple

from first_program.core.utils.logger import get_logger
from first_program.domain.entities.oracle_entity import OracleResponse
from first_program.domain.repositories.answer_repository import AnswerRepository


class AskOracleUseCase:
    """Use case that answers a question with a random Magic 8-Ball answer.

    The answer is drawn uniformly from the repository's answer set and does
    not depend on the question text. The random generator is injectable so
    tests can seed it.
    """

    def __init__(
        self,
        repository: AnswerRepository,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._repo = repository
        self._rng = rng or random.Random()
        self._rng_lock = threading.Lock()
        self._logger = logger or get_logger("oracle")

    def execute(self, question: Optional[str]) -> OracleResponse:
        if question is None or not question.strip():
            raise ValueError("Question cannot be null or empty")

        self._logger.info("Generating oracle response for question: %s", question)

        answers = self._repo.all_answers()
        with self._rng_lock:
            index = self._rng.randrange(len(answers))
        selected = answers[index]

        response = OracleResponse(
            question=question.strip(),
            answer=selected,
            response_time=datetime.now(timezone.utc),
        )
        self._logger.debug("Selected answer: %s", selected)
        return response

    def all_answers(self) -> Tuple[str, ...]:
        """Every possible answer, in order."""
        return self._repo.all_answers()

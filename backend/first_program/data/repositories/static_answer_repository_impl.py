from typing import Tuple

from first_program.domain.repositories.answer_repository import AnswerRepository


MAGIC_EIGHT_BALL_ANSWERS: Tuple[str, ...] = (
    "It is certain.",
    "Reply hazy, try again.",
    "Don't count on it.",
    "It is decidedly so.",
    "Ask again later.",
    "My reply is no.",
    "Without a doubt.",
    "Better not tell you now.",
    "My sources say no.",
    "Yes – definitely.",
    "Cannot predict now.",
    "Outlook not so good.",
    "You may rely on it.",
    "Concentrate and ask again.",
    "Very doubtful.",
    "As I see it, yes.",
    "Most likely.",
    "Outlook good.",
    "Yes.",
    "Signs point to yes.",
)


class StaticAnswerRepositoryImpl(AnswerRepository):
    """Answer repository backed by the built-in Magic 8-Ball answers."""

    def __init__(self, answers: Tuple[str, ...] = MAGIC_EIGHT_BALL_ANSWERS) -> None:
        if not answers:
            raise ValueError("The answer set cannot be empty")
        self._answers = tuple(answers)

    def all_answers(self) -> Tuple[str, ...]:
        return self._answers

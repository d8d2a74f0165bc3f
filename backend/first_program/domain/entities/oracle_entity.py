from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class OracleResponse:
    """Magic 8-Ball answer to a question.

    - question: the question, trimmed of surrounding whitespace
    - answer: one of the fixed answer set
    - response_time: UTC timestamp of the answer
    """
    question: str
    answer: str
    response_time: datetime

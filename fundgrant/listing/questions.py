"""
The ``questions`` field of an analysis.

Stored documents carry either a plain count or the list of question
responses. Both normalize to one integer through ``effective_count``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class QuestionCount:
    value: int

    @property
    def count(self) -> int:
        return self.value


@dataclass(frozen=True)
class QuestionResponses:
    responses: Tuple[Dict[str, Any], ...]

    @property
    def count(self) -> int:
        return len(self.responses)


QuestionsField = Union[QuestionCount, QuestionResponses]


def questions_field(raw: Any) -> QuestionsField:
    """Tag a raw ``questions`` value; anything unrecognised counts as zero."""
    if isinstance(raw, (list, tuple)):
        return QuestionResponses(tuple(raw))
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return QuestionCount(max(int(raw), 0))
    return QuestionCount(0)


def effective_count(field: QuestionsField) -> int:
    return field.count

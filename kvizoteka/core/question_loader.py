"""Loading question sets from JSON documents or the plain-text import format.

JSON documents look like this::

    {
      "questions": [
        {
          "id": 1,
          "question": "Which planet is known as the red planet?",
          "image": "images/mars.png",
          "answers": ["Venus", "Mars", "Jupiter", "Saturn"],
          "correctAnswer": 1
        }
      ]
    }

A bare top-level list of question records is accepted as well.

Plain-text files repeat blocks separated by blank lines or '---':

    Q: Question text (supports markdown + LaTeX). Additional lines until the
       next marker are treated as part of the question.
    IMAGE: images/mars.png   (optional)
    A: First answer
    B: Second answer
    ...                      (two to nine answers, A through I)
    CORRECT: B

Every question must name its correct answer; a runner cannot score otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, ValidationError, model_validator

from kvizoteka.constants.quiz_constants import MAX_ANSWER_COUNT, MIN_ANSWER_COUNT
from kvizoteka.core.errors import QuestionLoadError
from kvizoteka.core.models import Question

logger = logging.getLogger(__name__)

_OPTION_ORDER = [chr(ord("A") + offset) for offset in range(MAX_ANSWER_COUNT)]


@dataclass(slots=True)
class ImportedQuiz:
    """Container for an imported question set and where it came from."""

    source_path: Path
    questions: list[Question]


class QuestionRecord(BaseModel):
    """Schema of one question inside a JSON question document."""

    id: int | str | None = None
    question: str = Field(validation_alias=AliasChoices("question", "text"), min_length=1)
    image: str | None = Field(default=None, validation_alias=AliasChoices("image", "imageRef", "image_ref"))
    answers: list[str] = Field(min_length=MIN_ANSWER_COUNT, max_length=MAX_ANSWER_COUNT)
    correct_answer: int = Field(
        validation_alias=AliasChoices("correctAnswer", "correctAnswerIndex", "correct_answer_index")
    )

    @model_validator(mode="after")
    def _check_correct_answer(self) -> "QuestionRecord":
        if not 0 <= self.correct_answer < len(self.answers):
            raise ValueError(
                f"correctAnswer {self.correct_answer} is not a valid index into {len(self.answers)} answers"
            )
        return self


class QuestionDocument(BaseModel):
    """Schema of a whole JSON question document."""

    questions: list[QuestionRecord]


def load_questions_from_file(file_path: Path) -> ImportedQuiz:
    """Read a question file, choosing the format from its suffix."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise QuestionLoadError(f"Could not read question file {file_path}: {exc}") from exc

    if file_path.suffix.lower() == ".json":
        questions = parse_question_document(text)
    else:
        questions = parse_question_text(text)

    if not questions:
        raise QuestionLoadError(f"Question file {file_path} did not contain any questions.")
    logger.info("Loaded %d questions from %s", len(questions), file_path)
    return ImportedQuiz(source_path=file_path, questions=questions)


def parse_question_document(text: str) -> list[Question]:
    """Parse a JSON question document into questions."""
    try:
        raw: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuestionLoadError(f"Question document is not valid JSON: {exc}") from exc

    if isinstance(raw, list):
        raw = {"questions": raw}
    try:
        document = QuestionDocument.model_validate(raw)
    except ValidationError as exc:
        raise QuestionLoadError(f"Question document is malformed: {exc}") from exc

    return [
        Question(
            id=record.id if record.id is not None else position,
            text=record.question,
            answers=tuple(record.answers),
            correct_answer_index=record.correct_answer,
            image_ref=record.image or None,
        )
        for position, record in enumerate(document.questions, start=1)
    ]


def parse_question_text(text: str) -> list[Question]:
    """Parse the plain-text import format into questions."""
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block, position) for position, block in enumerate(blocks, start=1) if block]


def _parse_block(block: str, position: int) -> Question:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    image_ref: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("IMAGE:"):
            image_ref = line.split(":", 1)[1].strip() or None
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuestionLoadError(
                f"Question {position}: encountered text outside of a known section: '{line}'."
            )

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuestionLoadError(f"Question {position}: question text missing (Q: ...).")

    expected_letters = _OPTION_ORDER[: len(options)]
    if sorted(options) != expected_letters:
        raise QuestionLoadError(
            f"Question {position}: answers must be lettered consecutively from A."
        )
    if len(options) < MIN_ANSWER_COUNT:
        raise QuestionLoadError(
            f"Question {position}: at least {MIN_ANSWER_COUNT} answers are required."
        )

    answers = tuple(options[letter].strip() for letter in expected_letters)
    if any(not answer for answer in answers):
        raise QuestionLoadError(f"Question {position}: answer text cannot be empty.")

    if correct_letter is None:
        raise QuestionLoadError(f"Question {position}: CORRECT is required.")
    if correct_letter not in expected_letters:
        raise QuestionLoadError(
            f"Question {position}: CORRECT must be one of {', '.join(expected_letters)}."
        )

    return Question(
        id=position,
        text=question_text,
        answers=answers,
        correct_answer_index=expected_letters.index(correct_letter),
        image_ref=image_ref,
    )

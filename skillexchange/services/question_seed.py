from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from skillexchange.crud import assessment as assessment_crud
from skillexchange.database import commit_or_raise

logger = logging.getLogger(__name__)


DEFAULT_QUESTIONS: List[dict] = [
    # Programming
    {
        "category": "programming",
        "question": "What is a closure in JavaScript?",
        "options": [
            "A function that is called immediately after it's defined",
            "A function that has access to variables in its outer scope",
            "A function that takes another function as an argument",
            "A function that returns a value",
        ],
        "correct_option": 1,
    },
    {
        "category": "programming",
        "question": "What does the 'Promise' object represent in JavaScript?",
        "options": [
            "A callback function",
            "The eventual completion/failure of an asynchronous operation",
            "A synchronous operation that returns a value",
            "A variable that might change in the future",
        ],
        "correct_option": 1,
    },
    # Design
    {
        "category": "design",
        "question": "What is the purpose of white space in design?",
        "options": [
            "To fill empty areas of the page",
            "To create balance and guide the eye",
            "To save on printing costs",
            "To make text more readable",
        ],
        "correct_option": 1,
    },
    {
        "category": "design",
        "question": "What does the acronym 'CMYK' stand for in design?",
        "options": [
            "Create, Modify, Yield, Kick",
            "Convert, Match, Yellow, Key",
            "Cyan, Magenta, Yellow, Key (Black)",
            "Color, Mode, Yield, Knockout",
        ],
        "correct_option": 2,
    },
    # Language
    {
        "category": "language",
        "question": "What is the most widely spoken language in the world by number of native speakers?",
        "options": [
            "English",
            "Spanish",
            "Mandarin Chinese",
            "Hindi",
        ],
        "correct_option": 2,
    },
    {
        "category": "language",
        "question": "What is a cognate in language learning?",
        "options": [
            "A word that has the same spelling but different meaning in two languages",
            "A word that has a similar meaning and spelling in two languages",
            "A grammatical structure unique to a language",
            "A word with no equivalent in another language",
        ],
        "correct_option": 1,
    },
]


def seed_assessment_questions(db: Session) -> int:
    """Insert the default question pool when the table is empty."""
    if assessment_crud.count_questions(db) > 0:
        return 0
    created = assessment_crud.add_questions(db, DEFAULT_QUESTIONS)
    commit_or_raise(db, "seed assessment questions")
    logger.info("Seeded %s assessment questions", created)
    return created

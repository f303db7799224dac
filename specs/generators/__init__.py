"""
Interview Content Generators

Generators that call an LLM to draft agent content for the recruiter.

Generators:
- question_generator: Drafts questions for one assessment pillar

Usage:
    from specs.generators import generate_questions

    questions = generate_questions(
        pillar="behavioral",
        job_title="Backend Engineer",
        job_description="..."
    )
"""

from .question_generator import (
    generate_questions,
    QuestionGenerationError,
)

__all__ = [
    "generate_questions",
    "QuestionGenerationError",
]

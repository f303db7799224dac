"""
Interview script compiler and evaluation schema builder.
"""
from .xml_utils import escape_xml
from .persona import resolve_persona, PersonaBundle
from .prompt_builder import build_prompt, build_preview_prompt
from .evaluation_builder import (
    EvaluationSchemaBuilder,
    build_evaluation_tool,
    required_fields_for,
    DEFAULT_PILLAR_DESCRIPTIONS,
)

__all__ = [
    "escape_xml",
    "resolve_persona",
    "PersonaBundle",
    "build_prompt",
    "build_preview_prompt",
    "EvaluationSchemaBuilder",
    "build_evaluation_tool",
    "required_fields_for",
    "DEFAULT_PILLAR_DESCRIPTIONS",
]

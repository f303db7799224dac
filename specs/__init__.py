"""
Interview Agent Specification

This module provides the configuration model shared by the interview script
compiler and the evaluation schema builder, plus the boundary parsing that
turns stored agent records into that model.

Usage:
    from specs import (
        AgentConfig,
        agent_from_record,
        parse_prompt_mode,
        generate_questions,  # LLM-powered
    )

    # Parse a stored record (the "prompt" text is disambiguated here)
    agent = agent_from_record(record)

    # Or load one from disk
    agent = load_agent_from_json("path/to/agent.json")
"""

from .agent_schema import (
    # Enums
    Pillar,
    Persona,
    PropertyType,

    # Prompt mode
    GeneratedPrompt,
    RawOverridePrompt,
    PromptMode,

    # Agent configuration
    JobDetails,
    AgentConfig,
    CandidateRef,

    # Evaluation tool
    EvaluationProperty,
    EvaluationParameters,
    EvaluationTool,

    validate_agent,
)

from .agent_loader import (
    parse_prompt_mode,
    prompt_text,
    agent_from_record,
    agent_to_record,
    load_agent_from_json,
    save_agent_to_json,
)

from .pillars import (
    PILLAR_PROMPTS,
    get_pillar_label,
    get_pillar_prompt,
)

from .generators import (
    generate_questions,
    QuestionGenerationError,
)

__all__ = [
    # Enums
    "Pillar",
    "Persona",
    "PropertyType",

    # Prompt mode
    "GeneratedPrompt",
    "RawOverridePrompt",
    "PromptMode",

    # Agent configuration
    "JobDetails",
    "AgentConfig",
    "CandidateRef",

    # Evaluation tool
    "EvaluationProperty",
    "EvaluationParameters",
    "EvaluationTool",
    "validate_agent",

    # Loader functions
    "parse_prompt_mode",
    "prompt_text",
    "agent_from_record",
    "agent_to_record",
    "load_agent_from_json",
    "save_agent_to_json",

    # Pillar catalogue
    "PILLAR_PROMPTS",
    "get_pillar_label",
    "get_pillar_prompt",

    # Generators (LLM-powered)
    "generate_questions",
    "QuestionGenerationError",
]

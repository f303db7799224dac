"""
Interview Agent Schema

This module defines the data structures shared by the prompt compiler and
the evaluation schema builder.

Key concepts:
- AgentConfig: A recruiter-configured interview agent bound to one job
- PromptMode: Explicit variant for the agent's prompt field (generated
  script with optional instructions, or a raw XML override)
- EvaluationTool: The structured-output schema handed to the voice vendor
"""

from typing import Annotated, Literal, Optional, List, Dict, Any, Union
from pydantic import BaseModel, Field, field_validator
from enum import Enum


# =============================================================================
# ENUMS FOR TYPE SAFETY
# =============================================================================

class Pillar(str, Enum):
    EXPERIENCE = "experience"
    BEHAVIORAL = "behavioral"
    ROLE_SPECIFIC = "role_specific"
    CULTURAL_FIT = "cultural_fit"


class Persona(str, Enum):
    FORMAL = "formal"
    CASUAL = "casual"


class PropertyType(str, Enum):
    STRING = "STRING"
    INTEGER = "INTEGER"
    NUMBER = "NUMBER"
    ARRAY = "ARRAY"


# =============================================================================
# PROMPT MODE
# =============================================================================
# The stored "prompt" field is overloaded. It is disambiguated once, at the
# boundary (see specs.agent_loader.parse_prompt_mode), into one of these.

class GeneratedPrompt(BaseModel):
    """Compiler generates the script; instructions go into a fixed slot."""
    kind: Literal["generated"] = "generated"
    instructions: Optional[str] = None


class RawOverridePrompt(BaseModel):
    """Recruiter-authored XML returned as-is after placeholder substitution."""
    kind: Literal["raw_override"] = "raw_override"
    xml: str


PromptMode = Annotated[
    Union[GeneratedPrompt, RawOverridePrompt],
    Field(discriminator="kind"),
]


# =============================================================================
# AGENT CONFIGURATION
# =============================================================================

class JobDetails(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class AgentConfig(BaseModel):
    """
    An interview agent as configured by the recruiter.

    Question order is meaningful and preserved. Pillar display order is
    preserved too; duplicates are tolerated here and collapsed by the
    evaluation schema builder.
    """
    name: str = Field(min_length=1)
    job_details: JobDetails
    pillars: List[Pillar] = Field(default_factory=list)
    questions: List[str] = Field(default_factory=list)
    persona: Persona = Persona.FORMAL
    prompt_mode: PromptMode = Field(default_factory=GeneratedPrompt)

    @property
    def is_override(self) -> bool:
        return isinstance(self.prompt_mode, RawOverridePrompt)


class CandidateRef(BaseModel):
    """The only candidate field the compiler reads."""
    name: str


# =============================================================================
# EVALUATION TOOL
# =============================================================================

class EvaluationProperty(BaseModel):
    type: PropertyType
    description: str
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    enum: Optional[List[str]] = None


class EvaluationParameters(BaseModel):
    type: Literal["OBJECT"] = "OBJECT"
    required: List[str] = Field(default_factory=list)
    properties: Dict[str, EvaluationProperty] = Field(default_factory=dict)


class EvaluationTool(BaseModel):
    """Structured output schema the vendor enforces before the call ends."""
    name: Literal["call_outcomes"] = "call_outcomes"
    behavior: Literal["BLOCKING"] = "BLOCKING"
    parameters: EvaluationParameters
    description: str

    def to_payload(self) -> Dict[str, Any]:
        """Wire shape for the vendor, with unset optional keys dropped."""
        return self.model_dump(mode="json", exclude_none=True)


# =============================================================================
# VALIDATION
# =============================================================================

def validate_agent(agent: AgentConfig) -> List[str]:
    """Return non-fatal configuration warnings for an agent"""
    issues = []

    if not agent.is_override and not agent.questions:
        issues.append("Agent has no questions; the interview will only greet and close")

    seen = set()
    for pillar in agent.pillars:
        if pillar in seen:
            issues.append(f"Duplicate pillar: {pillar.value}")
        seen.add(pillar)

    for index, question in enumerate(agent.questions, 1):
        if not question.strip():
            issues.append(f"Question {index} is blank")

    if agent.is_override and agent.questions:
        issues.append("Raw XML override is active; configured questions are ignored")

    return issues

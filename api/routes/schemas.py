"""
Request/response bodies shared by the API routes.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from specs import AgentConfig, agent_from_record


class JobDetailsBody(BaseModel):
    title: str
    description: Optional[str] = ""


class AgentBody(BaseModel):
    """Agent as the dashboard submits it: one overloaded "prompt" text field."""
    name: str
    jobDetails: JobDetailsBody
    pillars: List[str] = Field(default_factory=list)
    questions: List[str] = Field(default_factory=list)
    persona: str = "formal"
    prompt: Optional[str] = ""

    def to_agent(self) -> AgentConfig:
        return agent_from_record(self.model_dump())


class CompiledInterview(BaseModel):
    prompt: str
    evaluation_tool: Dict[str, Any]
    warnings: List[str] = Field(default_factory=list)

"""
Agent routes: pillar catalogue, script preview, evaluation tool, question drafts.
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, ValidationError

from api.routes.schemas import AgentBody, CompiledInterview
from interview_factory import preview_interview
from prompts import EvaluationSchemaBuilder
from specs import (
    AgentConfig,
    Pillar,
    get_pillar_label,
    get_pillar_prompt,
    generate_questions,
    QuestionGenerationError,
)

router = APIRouter(prefix="/api", tags=["agents"])


class PillarInfo(BaseModel):
    id: str
    label: str
    description: str
    generation_prompt: str


class EvaluationToolRequest(BaseModel):
    pillars: List[str] = Field(default_factory=list)


class GenerateQuestionsRequest(BaseModel):
    pillar: Pillar
    job_title: str = Field(min_length=1)
    job_description: Optional[str] = None
    prompt: Optional[str] = None


class GenerateQuestionsResponse(BaseModel):
    questions: List[str]


def to_agent_or_422(body: AgentBody) -> AgentConfig:
    """Parse a submitted agent; configuration errors become a 422."""
    try:
        return body.to_agent()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"Invalid agent configuration: {e}")


@router.get("/pillars", response_model=list[PillarInfo])
async def list_pillars():
    """List the assessment pillars with their labels and descriptions."""
    builder = EvaluationSchemaBuilder()
    return [
        PillarInfo(
            id=pillar.value,
            label=get_pillar_label(pillar),
            description=builder.describe_pillar(pillar),
            generation_prompt=get_pillar_prompt(pillar),
        )
        for pillar in Pillar
    ]


@router.post("/agents/preview", response_model=CompiledInterview)
async def preview_agent(body: AgentBody):
    """Compile the script and evaluation tool the recruiter sees in the dashboard."""
    agent = to_agent_or_422(body)
    preview = preview_interview(agent)

    return CompiledInterview(
        prompt=preview.prompt,
        evaluation_tool=preview.evaluation_tool.to_payload(),
        warnings=preview.warnings,
    )


@router.post("/agents/evaluation-tool")
async def evaluation_tool(request: EvaluationToolRequest):
    """Build the evaluation tool for a pillar selection."""
    return EvaluationSchemaBuilder().build(request.pillars).to_payload()


@router.post("/questions/generate", response_model=GenerateQuestionsResponse)
def generate_pillar_questions(request: GenerateQuestionsRequest):
    """Draft interview questions for one pillar."""
    try:
        questions = generate_questions(
            pillar=request.pillar,
            job_title=request.job_title,
            job_description=request.job_description,
            prompt=request.prompt,
        )
    except QuestionGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return GenerateQuestionsResponse(questions=questions)

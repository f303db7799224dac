"""
Interview routes.
Compiles an agent for a specific candidate into the payload the call
service hands to the voice vendor.
"""
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from api.routes.agents import to_agent_or_422
from api.routes.schemas import AgentBody, CompiledInterview
from interview_factory import build_call_request, InterviewConfigurationError
from specs import CandidateRef, validate_agent

router = APIRouter(prefix="/api", tags=["interview"])


class CompileInterviewRequest(BaseModel):
    agent: AgentBody
    candidate_name: str = Field(min_length=1)
    phone_number: str = ""
    company_context: Optional[str] = None


@router.post("/interviews/compile", response_model=CompiledInterview)
async def compile_interview(request: CompileInterviewRequest):
    """Compile the call script and evaluation tool for one candidate."""
    agent = to_agent_or_422(request.agent)

    try:
        call_request = build_call_request(
            agent,
            CandidateRef(name=request.candidate_name),
            phone_number=request.phone_number,
            company_context=request.company_context,
        )
    except InterviewConfigurationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    payload = call_request.to_payload()

    return CompiledInterview(
        prompt=payload["prompt"],
        evaluation_tool=payload["evaluation_tool"],
        warnings=validate_agent(agent),
    )

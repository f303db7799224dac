"""
Interview Factory

Entry points for previewing an interview and for handing a compiled
interview to the voice vendor. Both paths go through the same compiler.

Usage:
    from interview_factory import preview_interview, initiate_interview

    # What the recruiter sees before any call
    preview = preview_interview(agent)
    print(preview.prompt)

    # Compile for a real candidate and place the call
    result = initiate_interview(
        agent,
        CandidateRef(name="Jane Doe"),
        phone_number="+15550100",
        placer=vendor_client,
        company_context=company.context,
    )
"""

import logging
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, Field

from prompts import build_prompt, build_preview_prompt, build_evaluation_tool
from specs import AgentConfig, CandidateRef, EvaluationTool, validate_agent

logger = logging.getLogger(__name__)


class InterviewConfigurationError(ValueError):
    """
    The agent could not be compiled into a call.

    Fatal for "initiate interview": never retried, shown to the recruiter as
    a configuration problem.
    """


class CallPlacer(Protocol):
    """The vendor client that actually dials the candidate."""

    def make_call(
        self,
        phone_number: str,
        prompt: str,
        evaluation_tool: Dict[str, Any],
    ) -> Any:
        ...


class CallRequest(BaseModel):
    phone_number: str
    prompt: str
    evaluation_tool: EvaluationTool

    def to_payload(self) -> Dict[str, Any]:
        """Vendor make-call request body"""
        return {
            "prompt": self.prompt,
            "evaluation_tool": self.evaluation_tool.to_payload(),
        }


class InterviewPreview(BaseModel):
    prompt: str
    evaluation_tool: EvaluationTool
    warnings: List[str] = Field(default_factory=list)


def preview_interview(agent: AgentConfig) -> InterviewPreview:
    """Compile the script and evaluation tool as shown in the dashboard."""
    return InterviewPreview(
        prompt=build_preview_prompt(agent),
        evaluation_tool=build_evaluation_tool(agent.pillars),
        warnings=validate_agent(agent),
    )


def build_call_request(
    agent: AgentConfig,
    candidate: CandidateRef,
    phone_number: str,
    company_context: Optional[str] = None,
) -> CallRequest:
    """
    Compile both artifacts for one candidate.

    Raises:
        InterviewConfigurationError: if compilation fails for any reason
    """
    try:
        prompt = build_prompt(agent, candidate.name, company_context)
        evaluation_tool = build_evaluation_tool(agent.pillars)
    except Exception as e:
        logger.error("Failed to compile interview for agent %r: %s", agent.name, e)
        raise InterviewConfigurationError(
            f"Agent '{agent.name}' could not be compiled: {e}"
        ) from e

    return CallRequest(
        phone_number=phone_number,
        prompt=prompt,
        evaluation_tool=evaluation_tool,
    )


def initiate_interview(
    agent: AgentConfig,
    candidate: CandidateRef,
    phone_number: str,
    placer: CallPlacer,
    company_context: Optional[str] = None,
) -> Any:
    """
    Compile the interview and hand it to the vendor client.

    The placer is only called once compilation has succeeded. Whatever the
    placer returns or raises is passed through unchanged.
    """
    request = build_call_request(agent, candidate, phone_number, company_context)

    logger.info(
        "Initiating interview call for agent %r to %s****",
        agent.name,
        phone_number[:4],
    )

    payload = request.to_payload()
    return placer.make_call(request.phone_number, payload["prompt"], payload["evaluation_tool"])

"""
Prompt Builder for the voice interview script.

This module compiles an AgentConfig into the XML document the voice vendor
uses as its conversation script. The document is assembled from:
1. Metadata about the agent, the job and the candidate
2. Optional company context
3. The persona bundle (formal or casual)
4. Fixed vocal constraints and conversation guidelines
5. The interview flow: introduction, custom instructions, questions, closing

A raw XML override bypasses all of the above; only the candidate and company
placeholders are filled in.

Every user-controlled value is escaped exactly once with escape_xml. The
compiler is a pure function of its arguments and is shared by the preview
path and the call-initiation path.
"""

import logging
from typing import List, Optional

from specs.agent_schema import AgentConfig, GeneratedPrompt, RawOverridePrompt
from prompts.persona import resolve_persona
from prompts.xml_utils import escape_xml

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

CANDIDATE_NAME_PLACEHOLDER = "[Candidate Name]"
COMPANY_CONTEXT_PLACEHOLDER = "[Company Context]"


# =============================================================================
# FIXED SCRIPT BLOCKS
# =============================================================================
# Not derived from configuration. Same for every agent.

VOCAL_OUTPUT_CONSTRAINTS = """  <vocal_output_constraints>
    <speech_rate>natural_conversational</speech_rate>
    <clarity>high</clarity>
    <pause_between_questions>natural</pause_between_questions>
  </vocal_output_constraints>"""

CONVERSATION_GUIDELINES = """  <conversation_guidelines>
    <active_listening>
      Do not move to the next question like a checklist. Briefly acknowledge the candidate's answer with phrases like "That's a great example," "I see," or "That sounds challenging" to bridge the conversation naturally.
    </active_listening>
    <clarification>
      If a candidate's answer is too brief or unclear, politely ask a follow-up probing question before moving to the next topic.
    </clarification>
    <flow>
      Maintain a professional narrative arc. Transitions between topics should be smooth, not abrupt.
    </flow>
  </conversation_guidelines>"""

CLOSING_INSTRUCTIONS = (
    "Thank the candidate for their time, explain the next steps clearly, "
    "and wish them a great day."
)


# =============================================================================
# PROMPT BUILDERS
# =============================================================================

def build_prompt(
    agent: AgentConfig,
    candidate_name: str,
    company_context: Optional[str] = None,
) -> str:
    """
    Compile the XML conversation script for one candidate.

    Args:
        agent: The interview agent configuration
        candidate_name: Name used in metadata and for the override placeholder
        company_context: Optional free-text company context

    Returns:
        The XML document as text
    """
    mode = agent.prompt_mode

    if isinstance(mode, RawOverridePrompt):
        logger.debug("Agent %r uses a raw XML override", agent.name)
        return _fill_override_placeholders(mode.xml, candidate_name, company_context)

    return _build_generated_prompt(agent, mode, candidate_name, company_context)


def build_preview_prompt(agent: AgentConfig) -> str:
    """
    Compile the script as the recruiter would see it before any call.

    Uses the candidate placeholder as the name and no company context, so a
    raw override comes back unchanged.
    """
    return build_prompt(agent, CANDIDATE_NAME_PLACEHOLDER)


def _fill_override_placeholders(
    xml: str,
    candidate_name: str,
    company_context: Optional[str],
) -> str:
    """Replace every placeholder occurrence. Nothing else is touched."""
    prompt = xml.replace(CANDIDATE_NAME_PLACEHOLDER, escape_xml(candidate_name))
    if company_context:
        prompt = prompt.replace(COMPANY_CONTEXT_PLACEHOLDER, escape_xml(company_context))
    return prompt


def _build_generated_prompt(
    agent: AgentConfig,
    mode: GeneratedPrompt,
    candidate_name: str,
    company_context: Optional[str],
) -> str:
    """Assemble the generated document from its top-level blocks."""

    blocks = []

    blocks.append(_build_metadata_section(agent, candidate_name))

    if company_context:
        blocks.append(_build_company_context_section(company_context))

    blocks.append(_build_persona_section(agent))
    blocks.append(VOCAL_OUTPUT_CONSTRAINTS)
    blocks.append(CONVERSATION_GUIDELINES)
    blocks.append(_build_interview_flow_section(agent, mode.instructions))

    body = "\n\n".join(blocks)

    return f"""{XML_DECLARATION}
<ai_master_prompt>
{body}
</ai_master_prompt>"""


def _build_metadata_section(agent: AgentConfig, candidate_name: str) -> str:
    return f"""  <metadata>
    <agent_name>{escape_xml(agent.name)}</agent_name>
    <job_title>{escape_xml(agent.job_details.title)}</job_title>
    <job_description>{escape_xml(agent.job_details.description)}</job_description>
    <candidate_name>{escape_xml(candidate_name)}</candidate_name>
  </metadata>"""


def _build_company_context_section(company_context: str) -> str:
    return f"""  <company_context>
    {escape_xml(company_context)}
  </company_context>"""


def _build_persona_section(agent: AgentConfig) -> str:
    persona = resolve_persona(agent.persona)

    return f"""  <Persona>
    <identity>{escape_xml(persona.identity)}</identity>
    <tone>{escape_xml(persona.tone)}</tone>
    <vocal_style>{escape_xml(persona.vocal_style)}</vocal_style>
  </Persona>"""


def _build_interview_flow_section(agent: AgentConfig, instructions: Optional[str]) -> str:
    """Introduction, optional custom instructions, questions, closing."""

    parts = [
        f"""    <introduction>
      Greet the candidate by name warmly. Introduce yourself and the {escape_xml(agent.job_details.title)} role. Break the ice to make them feel comfortable before diving into the questions.
    </introduction>"""
    ]

    # Blank instructions emit no element.
    if instructions and instructions.strip():
        parts.append(f"""    <custom_instructions>
      {escape_xml(instructions)}
    </custom_instructions>""")

    parts.append(_build_questions_section(agent.questions))

    parts.append(f"""    <closing>
      {CLOSING_INSTRUCTIONS}
    </closing>""")

    flow = "\n".join(parts)

    return f"""  <interview_flow>
{flow}
  </interview_flow>"""


def _build_questions_section(questions: List[str]) -> str:
    if not questions:
        return "    <questions>\n    </questions>"

    question_lines = "\n".join(
        f'      <question order="{order}">{escape_xml(question)}</question>'
        for order, question in enumerate(questions, 1)
    )

    return f"""    <questions>
{question_lines}
    </questions>"""

"""
Evaluation Schema Builder.

This module builds the "call_outcomes" evaluation tool the voice vendor uses
to force structured scoring output at the end of an interview call.

For every selected pillar the schema carries:
- <pillar>_score: integer score on a bounded 1-10 scale
- <pillar>_notes: free-text observations

Two fields are always present regardless of pillar selection:
- overall_recommendation: closed set of hiring recommendations
- summary: free-text summary of the interview

The pillar description table is owned by the builder instance, so callers
can swap it without touching module state.
"""

from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from specs.agent_schema import (
    EvaluationParameters,
    EvaluationProperty,
    EvaluationTool,
    Pillar,
    PropertyType,
)


DEFAULT_PILLAR_DESCRIPTIONS: Dict[str, str] = {
    Pillar.EXPERIENCE.value: "Assessment of the candidate's relevant work experience and technical background",
    Pillar.BEHAVIORAL.value: "Evaluation of the candidate's behavioral competencies and soft skills",
    Pillar.ROLE_SPECIFIC.value: "Assessment of skills and knowledge specific to the job role",
    Pillar.CULTURAL_FIT.value: "Evaluation of alignment with company culture and values",
}

RECOMMENDATION_LEVELS: List[str] = [
    "strongly_recommend",
    "recommend",
    "neutral",
    "not_recommend",
    "strongly_not_recommend",
]

TOOL_DESCRIPTION = (
    "Structured evaluation of the candidate interview performance "
    "across defined assessment pillars"
)


def _pillar_id(pillar: Union[Pillar, str]) -> str:
    return pillar.value if isinstance(pillar, Enum) else pillar


def _unique_pillars(pillars: Iterable[Union[Pillar, str]]) -> List[str]:
    """Drop repeats, keeping the first occurrence order."""
    seen = set()
    unique = []
    for pillar in pillars:
        pillar_id = _pillar_id(pillar)
        if pillar_id not in seen:
            seen.add(pillar_id)
            unique.append(pillar_id)
    return unique


class EvaluationSchemaBuilder:
    """
    Builds evaluation tools from a pillar selection.

    Args:
        pillar_descriptions: pillar id -> score field description. Defaults
            to DEFAULT_PILLAR_DESCRIPTIONS. Unknown pillars get a generic
            "Score for <pillar>" description.
        score_range: inclusive (minimum, maximum) for score fields
    """

    def __init__(
        self,
        pillar_descriptions: Optional[Mapping[str, str]] = None,
        score_range: Tuple[int, int] = (1, 10),
    ):
        if pillar_descriptions is None:
            pillar_descriptions = DEFAULT_PILLAR_DESCRIPTIONS
        self.pillar_descriptions = dict(pillar_descriptions)
        self.score_min, self.score_max = score_range

    def describe_pillar(self, pillar: Union[Pillar, str]) -> str:
        pillar_id = _pillar_id(pillar)
        return self.pillar_descriptions.get(pillar_id, f"Score for {pillar_id}")

    def build(self, pillars: Iterable[Union[Pillar, str]]) -> EvaluationTool:
        properties: Dict[str, EvaluationProperty] = {}

        for pillar_id in _unique_pillars(pillars):
            properties[f"{pillar_id}_score"] = EvaluationProperty(
                type=PropertyType.INTEGER,
                description=self.describe_pillar(pillar_id),
                minimum=self.score_min,
                maximum=self.score_max,
            )
            properties[f"{pillar_id}_notes"] = EvaluationProperty(
                type=PropertyType.STRING,
                description=f"Detailed notes and observations for {pillar_id} assessment",
            )

        properties["overall_recommendation"] = EvaluationProperty(
            type=PropertyType.STRING,
            enum=list(RECOMMENDATION_LEVELS),
            description="Overall hiring recommendation based on the interview",
        )
        properties["summary"] = EvaluationProperty(
            type=PropertyType.STRING,
            description="Brief summary of the interview and candidate performance",
        )

        return EvaluationTool(
            parameters=EvaluationParameters(
                required=list(properties),
                properties=properties,
            ),
            description=TOOL_DESCRIPTION,
        )


def build_evaluation_tool(
    pillars: Iterable[Union[Pillar, str]],
    pillar_descriptions: Optional[Mapping[str, str]] = None,
) -> EvaluationTool:
    """Build the call_outcomes evaluation tool for a pillar selection"""
    return EvaluationSchemaBuilder(pillar_descriptions).build(pillars)


def required_fields_for(pillars: Iterable[Union[Pillar, str]]) -> List[str]:
    """Field names the vendor must fill, in emission order"""
    return build_evaluation_tool(pillars).parameters.required

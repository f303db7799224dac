"""
Streamlit preview page for interview agents.

Run with: streamlit run ui/streamlit_app.py
"""
import json

import streamlit as st
from pydantic import ValidationError

from interview_factory import build_call_request, preview_interview, InterviewConfigurationError
from specs import CandidateRef, Pillar, agent_from_record, get_pillar_label, generate_questions, QuestionGenerationError

st.set_page_config(
    page_title="Interview Agent Preview",
    page_icon="📞",
    layout="wide",
)

# Initialize session state
if "questions" not in st.session_state:
    st.session_state.questions = ""


def parse_questions(text: str) -> list:
    return [line.strip() for line in text.splitlines() if line.strip()]


# Sidebar
with st.sidebar:
    st.title("Agent")

    name = st.text_input("Agent name", value="Screener")
    job_title = st.text_input("Job title", value="Backend Engineer")
    job_description = st.text_area("Job description", value="Builds APIs")
    persona = st.radio("Persona", ["formal", "casual"], horizontal=True)
    pillars = st.multiselect(
        "Pillars",
        [p.value for p in Pillar],
        default=[Pillar.EXPERIENCE.value, Pillar.BEHAVIORAL.value],
        format_func=lambda p: get_pillar_label(p),
    )

    st.divider()

    draft_pillar = st.selectbox("Draft questions for", [p.value for p in Pillar], format_func=get_pillar_label)
    if st.button("Generate Questions", use_container_width=True):
        with st.spinner("Generating..."):
            try:
                drafted = generate_questions(draft_pillar, job_title, job_description)
            except QuestionGenerationError as e:
                st.error(str(e))
                drafted = []
        if drafted:
            existing = parse_questions(st.session_state.questions)
            st.session_state.questions = "\n".join(existing + drafted)
            st.rerun()

# Main content
st.title("Interview Agent Preview")

st.text_area("Questions (one per line)", key="questions", height=180)
prompt = st.text_area(
    "Custom instructions, or a full XML override starting with <?xml",
    height=140,
)

col1, col2 = st.columns(2)
with col1:
    candidate_name = st.text_input("Candidate name (blank for placeholder preview)")
with col2:
    company_context = st.text_area("Company context", height=68)

record = {
    "name": name,
    "jobDetails": {"title": job_title, "description": job_description},
    "pillars": pillars,
    "questions": parse_questions(st.session_state.questions),
    "persona": persona,
    "prompt": prompt,
}

try:
    agent = agent_from_record(record)
except ValidationError as e:
    st.error(f"Invalid agent configuration: {e}")
    st.stop()

if agent.is_override:
    st.info("Raw XML override active: questions and persona are ignored.")

preview = preview_interview(agent)
for warning in preview.warnings:
    st.warning(warning)

if candidate_name:
    try:
        call_request = build_call_request(
            agent,
            CandidateRef(name=candidate_name),
            phone_number="",
            company_context=company_context or None,
        )
    except InterviewConfigurationError as e:
        st.error(str(e))
        st.stop()
    xml_text = call_request.prompt
else:
    xml_text = preview.prompt

left, right = st.columns([3, 2])
with left:
    st.subheader("Call Script")
    st.code(xml_text, language="xml")
with right:
    st.subheader("Evaluation Tool")
    st.code(json.dumps(preview.evaluation_tool.to_payload(), indent=2), language="json")

st.divider()
st.caption("Interview Agent Preview | Powered by Claude")

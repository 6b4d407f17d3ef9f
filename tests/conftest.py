"""Shared test fixtures."""

from __future__ import annotations

import pytest

from resume_assistant.assistant import ResumeAssistant
from resume_assistant.config import AppConfig
from resume_assistant.models.document import (
    DraftDocument,
    DraftEducation,
    DraftExperience,
    DraftPersonalInfo,
)
from resume_assistant.models.profile import PersonalInfo, Profile
from resume_assistant.models.session import SessionState

RESUME_TRIGGER = "I need a resume for a software engineer position"

# Answers keyed by the profile field each question is attributed to
INTERVIEW_ANSWERS = {
    "personal_info.name": "Jane Doe",
    "personal_info.email": "jane.doe@example.com",
    "personal_info.phone": "(415) 555-0199",
    "personal_info.location": "San Francisco, CA",
    "personal_info.linkedin": "https://linkedin.com/in/janedoe",
    "target_role": "Backend Engineer",
    "industry": "Fintech",
    "years_experience": "7 years",
    "details.job_title": "Senior Backend Engineer",
    "details.employer": "Acme Payments, Mar 2019 - Present",
    "details.responsibilities": "Owned the settlement service.",
    "details.achievements": "Cut settlement latency by 40%. Shipped the billing v2 platform.",
    "details.tools": "Python, Kafka, PostgreSQL",
    "details.leadership": "Led a team of 4 engineers.",
    "details.education_level": "Bachelor's degree",
    "details.degree": "B.S. Computer Science",
    "details.school": "State University, graduated 2016",
    "details.gpa": "3.8",
    "details.honors": "Dean's list",
    "details.technical_skills": "Python, Go, SQL and Kubernetes",
    "details.soft_skills": "Mentoring, communication",
    "details.certifications": "AWS Solutions Architect",
    "details.projects": "Open-source rate limiter",
    "details.awards": "none",
}

STRONG_RESUME_TEXT = """Jane Doe
jane.doe@example.com
(415) 555-0199

Professional Summary
Backend engineer focused on scalable payment systems and data pipelines.

Experience
Senior Backend Engineer, Acme Payments
2019 - Present
- Reduced settlement latency by 40% across 3 regions
- Led migration of 12 services to Kubernetes
- Increased test coverage to 90% and streamlined releases

Backend Engineer, Ledger Labs
2016 - 2019
- Built a reconciliation engine processing $2M daily
- Developed customer analytics dashboards for stakeholder reviews

Education
Bachelor of Science in Computer Science
State University, 2016

Skills
Python, SQL, Docker, AWS, Git, Linux, Kubernetes, Java, React, Excel
"""


@pytest.fixture
def config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def assistant(config) -> ResumeAssistant:
    return ResumeAssistant(config)


@pytest.fixture
def idle_session() -> SessionState:
    return SessionState()


@pytest.fixture
def known_profile() -> Profile:
    """Profile with every personal and career field already answered."""
    return Profile(
        personal_info=PersonalInfo(
            name="Jane Doe",
            email="jane.doe@example.com",
            phone="(415) 555-0199",
            location="San Francisco, CA",
            linkedin="https://linkedin.com/in/janedoe",
        ),
        target_role="Backend Engineer",
        industry="Fintech",
        years_experience=7,
    )


@pytest.fixture
def full_draft() -> DraftDocument:
    return DraftDocument(
        personal_info=DraftPersonalInfo(
            full_name="Jane Doe",
            email="jane.doe@example.com",
            phone="(415) 555-0199",
            address="San Francisco, CA",
            linkedin="linkedin.com/in/janedoe",
            website="janedoe.dev",
        ),
        summary="Backend engineer with seven years of experience building payment systems.",
        experience=[
            DraftExperience(job_title="Senior Backend Engineer", company="Acme Payments"),
            DraftExperience(job_title="Backend Engineer", company="Ledger Labs"),
            DraftExperience(job_title="Software Engineer", company="Initech"),
            DraftExperience(job_title="Intern", company="Globex"),
        ],
        education=[DraftEducation(degree="B.S. Computer Science", school="State University")],
        skills=["Python", "Go", "SQL", "Kubernetes", "Kafka"],
        certifications=["AWS Solutions Architect"],
    )


def answer_all(assistant: ResumeAssistant, session: SessionState) -> tuple[str, SessionState]:
    """Answer every remaining interview question, returning the last reply."""
    reply = ""
    while session.state.value == "interviewing":
        field = session.sequence.current.field
        reply, session = assistant.respond(INTERVIEW_ANSWERS.get(field, "n/a"), session)
    return reply, session

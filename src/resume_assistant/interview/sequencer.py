"""Question sequencing for the resume interview.

The plan is built in fixed phases: personal details, career targeting,
experience, education, skills, an optional entry-level block and closing
questions. Only the first two phases consult the profile; every question in
those phases is skipped once its field is known.
"""

from __future__ import annotations

import logging

from resume_assistant.interview.intent import detect_career_change, detect_entry_level
from resume_assistant.models.profile import Profile
from resume_assistant.models.session import Question

logger = logging.getLogger(__name__)

PERSONAL_QUESTIONS: list[tuple[str, str]] = [
    ("name", "Let's start with your personal information. What's your full name?"),
    ("email", "What's your professional email address?"),
    ("phone", "What's your phone number?"),
    ("location", "What city and state are you located in? (This helps with local job searches)"),
    ("linkedin", "Do you have a LinkedIn profile? If yes, please share the URL."),
]

CAREER_QUESTIONS: list[tuple[str, str]] = [
    (
        "target_role",
        "What specific job title or role are you targeting? "
        "(e.g., 'Senior Software Engineer', 'Marketing Manager')",
    ),
    (
        "industry",
        "What industry are you focusing on? (e.g., Technology, Healthcare, Finance, Education)",
    ),
    ("years_experience", "How many years of professional experience do you have in your field?"),
]

EXPERIENCE_QUESTIONS: list[tuple[str, str]] = [
    (
        "details.job_title",
        "Let's talk about your work experience. Starting with your most recent position, "
        "what was your job title?",
    ),
    ("details.employer", "What company did you work for, and what dates did you work there?"),
    ("details.responsibilities", "What were your main responsibilities in this role?"),
    (
        "details.achievements",
        "What were your biggest achievements or accomplishments? "
        "Please include specific numbers, percentages, or results if possible.",
    ),
    ("details.tools", "What technologies, tools, or methodologies did you use in this position?"),
    (
        "details.leadership",
        "Did you manage any team members or lead any projects? If so, please provide details.",
    ),
]

EDUCATION_QUESTIONS: list[tuple[str, str]] = [
    ("details.education_level", "Now let's cover your education. What's your highest level of education?"),
    ("details.degree", "What was your degree and major/field of study?"),
    ("details.school", "Which school did you attend and when did you graduate?"),
    ("details.gpa", "What was your GPA? (Include only if 3.5 or higher)"),
    ("details.honors", "Did you receive any honors, awards, or participate in relevant activities?"),
]

SKILL_QUESTIONS: list[tuple[str, str]] = [
    (
        "details.technical_skills",
        "What are your top technical skills? (programming languages, software, tools, etc.)",
    ),
    (
        "details.soft_skills",
        "What are your strongest soft skills? (leadership, communication, problem-solving, etc.)",
    ),
    ("details.certifications", "Do you have any certifications or professional licenses?"),
]

ENTRY_LEVEL_QUESTION = (
    "details.extracurricular",
    "Do you have any relevant internships, volunteer work, or academic projects to include?",
)

CLOSING_QUESTIONS: list[tuple[str, str]] = [
    (
        "details.projects",
        "Do you have any notable projects, publications, or portfolio items to showcase?",
    ),
    (
        "details.awards",
        "Are there any awards, honors, or professional achievements you'd like to highlight?",
    ),
]


def plan_questions(trigger_text: str, profile: Profile) -> list[Question]:
    """Build the ordered interview plan for ``trigger_text`` and ``profile``."""
    plan: list[Question] = []

    for name, prompt in PERSONAL_QUESTIONS:
        if getattr(profile.personal_info, name) is None:
            plan.append(Question(prompt=prompt, field=f"personal_info.{name}"))

    for name, prompt in CAREER_QUESTIONS:
        if getattr(profile, name) is None:
            plan.append(Question(prompt=prompt, field=name))

    for field, prompt in (*EXPERIENCE_QUESTIONS, *EDUCATION_QUESTIONS, *SKILL_QUESTIONS):
        plan.append(Question(prompt=prompt, field=field))

    if detect_entry_level(trigger_text):
        field, prompt = ENTRY_LEVEL_QUESTION
        plan.append(Question(prompt=prompt, field=field))

    for field, prompt in CLOSING_QUESTIONS:
        plan.append(Question(prompt=prompt, field=field))

    logger.debug(
        "Planned %d questions (entry_level=%s, career_change=%s)",
        len(plan),
        detect_entry_level(trigger_text),
        detect_career_change(trigger_text),
    )
    return plan


def generate_questions(trigger_text: str, profile: Profile) -> list[str]:
    """Return the interview prompts, in the order they will be asked."""
    return [q.prompt for q in plan_questions(trigger_text, profile)]

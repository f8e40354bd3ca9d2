"""
Resume text extraction.

Flattens a Resume into the single lowercase corpus that keyword matching runs on.
"""

from typing import List

from fitcheck.contexts.intake.resume_data_structure import Resume


def resume_fields(resume: Resume) -> List[str]:
    """
    Collect every searchable resume field in a fixed order.

    Order: profile (name, summary, email, location); each work experience
    (company, job title, descriptions); each education (school, degree,
    descriptions); each project (name, descriptions); skill descriptions;
    featured skill names. Empty fields are dropped.

    Args:
        resume: Resume to flatten

    Returns:
        Non-empty field values in extraction order
    """
    profile = resume.profile
    fields = [profile.name, profile.summary, profile.email, profile.location]

    for exp in resume.work_experiences:
        fields.extend([exp.company, exp.job_title, *exp.descriptions])

    for edu in resume.educations:
        fields.extend([edu.school, edu.degree, *edu.descriptions])

    for proj in resume.projects:
        fields.extend([proj.project, *proj.descriptions])

    fields.extend(resume.skills.descriptions)
    fields.extend(skill.skill for skill in resume.skills.featured_skills)

    return [f for f in fields if f]


def extract_resume_text(resume: Resume) -> str:
    """
    Build the lowercase search corpus for a resume.

    Fields from resume_fields() joined by single spaces, then lowercased.
    Pure and deterministic: the same resume always yields the same string.
    """
    return " ".join(resume_fields(resume)).lower()

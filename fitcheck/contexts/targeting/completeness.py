"""
Resume completeness estimation.

Rates how complete the resume data is, independently of any target. The result
is reported as "accuracy" and drives the confidence tier.
"""

from typing import Dict

from fitcheck.contexts.intake.resume_data_structure import Resume
from fitcheck.utils.numeric import percentage, round_half_up


def completeness_checks(resume: Resume) -> Dict[str, bool]:
    """
    Run the six completeness checks.

    Returns:
        Dict mapping check name to whether it passed, in a fixed order:
        name, email, summary, work_experience, education, skills
    """
    skills = resume.skills
    has_skills = any(d.strip() for d in skills.descriptions) or any(
        s.skill.strip() for s in skills.featured_skills
    )

    return {
        "name": bool(resume.profile.name),
        "email": bool(resume.profile.email),
        "summary": bool(resume.profile.summary),
        "work_experience": len(resume.work_experiences) > 0,
        "education": len(resume.educations) > 0,
        "skills": has_skills,
    }


def estimate_accuracy(resume: Resume) -> int:
    """Percentage of passed completeness checks, rounded (0-100)."""
    checks = completeness_checks(resume)
    return round_half_up(percentage(sum(checks.values()), len(checks)))

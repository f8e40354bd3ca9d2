"""
Integration tests for the scoring pipeline.
Tests: resume file -> registry target -> ScoreResult -> analysis history.

Uses the bundled role and job profile tables with the resume fixtures.
"""

from pathlib import Path

import pytest

from fitcheck.contexts.intake import Resume, load_default_registry
from fitcheck.contexts.targeting import FitLevel, Severity, compute_score
from fitcheck.utils.analysis_history import append_analysis, history_stats, load_history

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(scope="module")
def registry():
    return load_default_registry()


@pytest.fixture(scope="module")
def frontend_resume():
    return Resume.from_file(FIXTURES_DIR / "resume_frontend.yaml")


@pytest.fixture(scope="module")
def data_resume():
    return Resume.from_file(FIXTURES_DIR / "resume_data_scientist.json")


@pytest.mark.integration
def test_frontend_resume_against_frontend_role(registry, frontend_resume):
    """Role-weighted: keyword categories plus education/projects heuristics."""
    result = compute_score(frontend_resume, registry.get_role("frontend-developer"))

    assert result.breakdown == {"skills": 40, "experience": 80, "education": 80, "projects": 30}
    assert result.overall == 59
    assert result.fit_level is FitLevel.LOW
    assert result.accuracy == 100
    assert result.confidence is FitLevel.HIGH

    # "ui" is found inside "building"
    assert result.matched_keywords == (
        "react", "css", "typescript", "tailwind",
        "frontend", "ui", "web development", "responsive",
        "git", "figma",
    )
    assert result.missing_keywords == (
        "javascript", "html", "vue", "angular", "sass",
        "bootstrap", "user interface", "webpack", "npm", "yarn",
    )
    assert result.gaps == ()
    assert result.strengths == ()


@pytest.mark.integration
def test_frontend_resume_against_frontend_job(registry, frontend_resume):
    result = compute_score(frontend_resume, registry.get_job_profile("frontend-dev"))

    assert result.overall == 100
    assert result.fit_level is FitLevel.HIGH
    assert result.gaps == ()
    assert result.improvement_feedback == ()
    assert result.strengths == ("React.js", "JavaScript", "CSS/Styling", "2+ Years Experience")


@pytest.mark.integration
def test_frontend_resume_against_data_scientist_job(registry, frontend_resume):
    """Only the degree requirement is met: round(8 / 27 * 100) = 30."""
    result = compute_score(frontend_resume, registry.get_job_profile("data-scientist"))

    assert result.overall == 30
    assert result.fit_level is FitLevel.LOW
    assert result.strengths == ("Statistics/CS Degree",)
    assert len(result.gaps) == 1
    assert result.gaps[0].category == "skills"
    assert result.gaps[0].missing == ("Python", "Machine Learning")
    assert result.gaps[0].severity is Severity.HIGH
    assert len(result.improvement_feedback) == 2


@pytest.mark.integration
def test_data_resume_against_data_scientist_job(registry, data_resume):
    result = compute_score(data_resume, registry.get_job_profile("data-scientist"))

    # (10 + 8) / 27
    assert result.overall == 67
    assert result.fit_level is FitLevel.MEDIUM
    assert result.breakdown == {"skills": 53, "education": 100}
    assert result.matched_keywords == ("python", "pandas", "data science")
    assert result.missing_keywords == ("machine learning", "deep learning", "tensorflow", "pytorch")
    assert result.strengths == ("Python", "Statistics/CS Degree")
    assert result.improvement_feedback == (
        "Add Machine Learning to your skills section - this is a required skill.",
    )
    # Empty email and no education entries
    assert result.accuracy == 67
    assert result.confidence is FitLevel.MEDIUM


@pytest.mark.integration
def test_data_resume_against_data_scientist_role(registry, data_resume):
    """Substring matching counts the single letter "r" as present."""
    result = compute_score(data_resume, registry.get_role("data-scientist"))

    assert result.breakdown["skills"] == 40
    assert "r" in result.matched_keywords
    assert result.overall == 39


@pytest.mark.integration
def test_every_target_scores_within_bounds(registry, frontend_resume, data_resume):
    targets = registry.list_roles() + registry.list_job_profiles()
    for resume in (frontend_resume, data_resume, Resume()):
        for target in targets:
            result = compute_score(resume, target)
            assert 0 <= result.overall <= 100
            assert 0 <= result.accuracy <= 100
            assert all(0 <= v <= 100 for v in result.breakdown.values())


@pytest.mark.integration
def test_empty_resume_against_job_profiles(registry):
    for profile in registry.list_job_profiles():
        result = compute_score(Resume(), profile)
        assert result.overall == 0
        assert len(result.improvement_feedback) == len(profile.requirements)


@pytest.mark.integration
def test_saved_results_feed_dashboard(tmp_path, registry, frontend_resume, data_resume):
    history_file = tmp_path / "history.jsonl"
    frontend_job = registry.get_job_profile("frontend-dev")
    data_job = registry.get_job_profile("data-scientist")

    append_analysis(
        compute_score(frontend_resume, frontend_job),
        frontend_job.title,
        frontend_job.company,
        history_file,
    )
    append_analysis(
        compute_score(data_resume, data_job), data_job.title, data_job.company, history_file
    )

    stats = history_stats(load_history(history_file))
    assert stats.total_analyses == 2
    # (100 + 67) / 2 = 83.5
    assert stats.average_score == 84
    assert stats.high_fit_count == 1
    assert [r["job_title"] for r in stats.recent_analyses] == ["Data Scientist", "Frontend Developer"]

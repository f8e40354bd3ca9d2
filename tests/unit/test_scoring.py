"""Unit tests for the scoring engine in both modes."""

import pytest

from fitcheck.contexts.intake.job_data_structure import (
    JobProfile,
    Requirement,
    RequirementCategory,
    RoleProfile,
)
from fitcheck.contexts.intake.resume_data_structure import (
    Education,
    Project,
    Resume,
    ResumeProfile,
    Skills,
)
from fitcheck.contexts.targeting.exceptions import TargetModeMismatchError
from fitcheck.contexts.targeting.fit_levels import FitLevel, Severity
from fitcheck.contexts.targeting.scoring import (
    ScoringEngine,
    ScoringMode,
    compute_score,
    education_score,
    projects_score,
    weighted_overall,
)

FRONTEND_ROLE = RoleProfile.from_dict(
    {
        "title": "Frontend Developer",
        "keywords": {
            "skills": [
                "react", "javascript", "html", "css", "typescript",
                "vue", "angular", "sass", "tailwind", "bootstrap",
            ],
            "experience": ["frontend", "ui", "web development", "user interface", "responsive"],
            "tools": ["git", "webpack", "npm", "yarn", "figma", "adobe xd"],
        },
        "weights": {"skills": 40, "experience": 35, "education": 15, "projects": 10},
    },
    role_key="frontend-developer",
)


def _requirement(req_id, category="skills", required=True, keywords=None, weight=5):
    return Requirement(
        id=req_id,
        title=req_id.capitalize(),
        category=RequirementCategory(category),
        required=required,
        keywords=tuple(keywords or [req_id]),
        weight=weight,
    )


def _react_typescript_resume() -> Resume:
    return Resume(
        profile=ResumeProfile(name="Alex Kim", email="alex@example.com"),
        skills=Skills(descriptions=("React", "TypeScript")),
    )


class TestRoleWeighted:
    """Role-weighted mode: fixed categories with weights summing to 100."""

    @pytest.mark.unit
    def test_react_typescript_frontend_scenario(self):
        """Two of ten skills match; education and projects fall back to heuristics."""
        result = compute_score(_react_typescript_resume(), FRONTEND_ROLE)

        assert result.breakdown == {"skills": 20, "experience": 0, "education": 40, "projects": 20}
        # (20*40 + 0*35 + 40*15 + 20*10) / 100
        assert result.overall == 16
        assert result.fit_level is FitLevel.LOW
        assert result.mode == "role"
        assert result.target_id == "frontend-developer"

    @pytest.mark.unit
    def test_confidence_comes_from_completeness_not_score(self):
        """Name, email, and skills present: 3 of 6 checks -> 50% -> Low confidence."""
        result = compute_score(_react_typescript_resume(), FRONTEND_ROLE)
        assert result.accuracy == 50
        assert result.confidence is FitLevel.LOW

    @pytest.mark.unit
    def test_matched_keywords_in_category_order(self):
        result = compute_score(_react_typescript_resume(), FRONTEND_ROLE)
        assert result.matched_keywords == ("react", "typescript")

    @pytest.mark.unit
    def test_missing_keywords_capped_at_ten(self):
        result = compute_score(_react_typescript_resume(), FRONTEND_ROLE)
        assert len(result.missing_keywords) == 10
        assert result.missing_keywords[:3] == ("javascript", "html", "css")

    @pytest.mark.unit
    def test_unweighted_keyword_category_only_feeds_keywords(self):
        """Tools have no weight: matching one changes keywords but not the score."""
        base = compute_score(_react_typescript_resume(), FRONTEND_ROLE)
        with_tools = compute_score(
            Resume(
                profile=ResumeProfile(name="Alex Kim", email="alex@example.com"),
                skills=Skills(descriptions=("React", "TypeScript", "Figma")),
            ),
            FRONTEND_ROLE,
        )
        assert "figma" in with_tools.matched_keywords
        assert with_tools.overall == base.overall
        assert "tools" not in with_tools.breakdown

    @pytest.mark.unit
    def test_duplicate_keywords_across_categories_reported_once(self):
        role = RoleProfile.from_dict(
            {
                "keywords": {"skills": ["python", "sql"], "experience": ["python", "etl"]},
                "weights": {"skills": 50, "experience": 50},
            },
            role_key="dup",
        )
        result = compute_score(Resume(skills=Skills(descriptions=("Python",))), role)
        assert result.matched_keywords == ("python",)
        assert result.missing_keywords == ("sql", "etl")

    @pytest.mark.unit
    def test_empty_resume_gets_defined_low_score(self):
        result = compute_score(Resume(), FRONTEND_ROLE)
        # Only the education (40) and projects (20) fallbacks contribute
        assert result.overall == 8
        assert result.accuracy == 0
        assert result.confidence is FitLevel.LOW

    @pytest.mark.unit
    def test_category_without_keywords_scores_zero(self):
        role = RoleProfile.from_dict(
            {"keywords": {"skills": []}, "weights": {"skills": 100}}, role_key="empty-skills"
        )
        result = compute_score(Resume(), role)
        assert result.breakdown == {"skills": 0}
        assert result.overall == 0


class TestHeuristics:
    """Education and projects heuristics."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "degree, expected",
        [
            ("B.S. Computer Science", 80),
            ("BEng Mechanical Engineering", 80),
            ("Information Technology Diploma", 80),
            ("BA History", 40),
        ],
    )
    def test_education_score(self, degree, expected):
        assert education_score(Resume(educations=(Education(degree=degree),))) == expected

    @pytest.mark.unit
    def test_education_without_entries(self):
        assert education_score(Resume()) == 40

    @pytest.mark.unit
    @pytest.mark.parametrize("count, expected", [(0, 20), (1, 30), (3, 90), (4, 100), (7, 100)])
    def test_projects_score(self, count, expected):
        resume = Resume(projects=tuple(Project(project=f"P{i}") for i in range(count)))
        assert projects_score(resume) == expected


@pytest.mark.unit
def test_weighted_overall_rounds_half_up():
    # 62.5 * 100 / 100 = 62.5 -> 63
    assert weighted_overall({"skills": 62.5}, {"skills": 100}) == 63


class TestRequirementWeighted:
    """Requirement-weighted mode: matched weight over total weight."""

    @pytest.mark.unit
    def test_required_miss_optional_hit_scenario(self):
        """Required (10) missed, optional (5) matched: round(5/15*100) = 33."""
        profile = JobProfile(
            id="platform",
            title="Platform Engineer",
            company="Acme",
            requirements=(
                _requirement("kubernetes", required=True, weight=10),
                _requirement("python", required=False, weight=5),
            ),
        )
        resume = Resume(skills=Skills(descriptions=("Python",)))

        result = compute_score(resume, profile)

        assert result.overall == 33
        assert result.fit_level is FitLevel.LOW
        assert len(result.gaps) == 1
        assert result.gaps[0].severity is Severity.HIGH
        assert result.gaps[0].missing == ("Kubernetes",)
        assert result.strengths == ("Python",)
        assert result.matched_requirements == ("Python",)

    @pytest.mark.unit
    def test_feedback_one_line_per_unmatched_requirement(self):
        profile = JobProfile(
            id="data",
            title="Data Engineer",
            requirements=(
                _requirement("spark", required=True, weight=8),
                _requirement("airflow", required=False, weight=4),
                _requirement("sql", required=True, weight=6),
            ),
        )
        result = compute_score(Resume(skills=Skills(descriptions=("SQL",))), profile)

        assert result.improvement_feedback == (
            "Add Spark to your skills section - this is a required skill.",
            "Consider adding Airflow to strengthen your profile for this role.",
        )

    @pytest.mark.unit
    def test_all_matched_is_high_fit(self):
        profile = JobProfile(id="py", title="Python Dev", requirements=(_requirement("python"),))
        result = compute_score(Resume(skills=Skills(descriptions=("Python",))), profile)
        assert result.overall == 100
        assert result.fit_level is FitLevel.HIGH
        assert result.gaps == ()
        assert result.improvement_feedback == ()

    @pytest.mark.unit
    def test_breakdown_per_requirement_category(self):
        profile = JobProfile(
            id="mixed",
            title="Mixed",
            requirements=(
                _requirement("python", weight=6),
                _requirement("rust", weight=4),
                _requirement("statistics", category="education", weight=5),
            ),
        )
        result = compute_score(Resume(skills=Skills(descriptions=("Python",))), profile)
        assert result.breakdown == {"skills": 60, "education": 0}

    @pytest.mark.unit
    def test_missing_keywords_untruncated(self):
        requirements = tuple(
            _requirement(f"tool{i}", required=False, weight=1) for i in range(12)
        )
        profile = JobProfile(id="many", title="Many", requirements=requirements)
        result = compute_score(Resume(), profile)
        assert len(result.missing_keywords) == 12
        assert result.overall == 0


class TestEngineMode:
    """Mode switch on the engine."""

    @pytest.mark.unit
    def test_mode_follows_target_type(self):
        assert ScoringMode.for_target(FRONTEND_ROLE) is ScoringMode.ROLE_WEIGHTED

    @pytest.mark.unit
    def test_fixed_mode_rejects_other_target(self):
        engine = ScoringEngine(mode=ScoringMode.REQUIREMENT_WEIGHTED)
        with pytest.raises(TargetModeMismatchError):
            engine.score(Resume(), FRONTEND_ROLE)

    @pytest.mark.unit
    def test_fixed_mode_accepts_matching_target(self):
        engine = ScoringEngine(mode=ScoringMode.ROLE_WEIGHTED)
        assert engine.score(Resume(), FRONTEND_ROLE).mode == "role"

    @pytest.mark.unit
    def test_unknown_target_type(self):
        with pytest.raises(TypeError):
            compute_score(Resume(), {"title": "not a profile"})


@pytest.mark.unit
def test_result_to_dict_round_trip_fields():
    """to_dict gives plain JSON types; from_dict restores enums."""
    from fitcheck.contexts.targeting.result import ScoreResult

    profile = JobProfile(
        id="platform",
        title="Platform Engineer",
        requirements=(_requirement("kubernetes", weight=10), _requirement("python", weight=5)),
    )
    result = compute_score(Resume(skills=Skills(descriptions=("Python",))), profile)
    record = result.to_dict()

    assert record["fit_level"] == "Low"
    assert record["gaps"][0]["severity"] == "high"
    assert ScoreResult.from_dict(record) == result

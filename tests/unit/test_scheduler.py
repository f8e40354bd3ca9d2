"""Unit tests for debounced scoring."""

import threading

import pytest
from loguru import logger

from fitcheck.contexts.intake.job_data_structure import RoleProfile
from fitcheck.contexts.intake.resume_data_structure import Resume, ResumeProfile, Skills
from fitcheck.contexts.targeting.scheduler import DebouncedScorer
from fitcheck.contexts.targeting.scoring import ScoringEngine

DELAY_S = 0.05
WAIT_S = 5


def _role(key: str) -> RoleProfile:
    return RoleProfile.from_dict(
        {"keywords": {"skills": ["python"]}, "weights": {"skills": 100}}, role_key=key
    )


NAMED = Resume(profile=ResumeProfile(name="Ada"), skills=Skills(descriptions=("Python",)))
UNNAMED = Resume(skills=Skills(descriptions=("Python",)))


class BlockingEngine(ScoringEngine):
    """Engine that pauses inside score() until released."""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()
        self.calls = 0

    def score(self, resume, target):
        self.calls += 1
        if self.calls == 1:
            self.entered.set()
            self.release.wait(WAIT_S)
        return super().score(resume, target)


class TestDebouncedScorer:
    """Only the most recent request delivers a result."""

    @pytest.mark.unit
    def test_single_request_delivers(self):
        results = []
        scorer = DebouncedScorer(results.append, delay=DELAY_S)

        assert scorer.schedule(NAMED, _role("first"))
        scorer.wait(WAIT_S)

        assert [r.target_id for r in results] == ["first"]
        assert results[0].overall == 100
        assert not scorer.pending

    @pytest.mark.unit
    def test_rescheduling_supersedes_pending_run(self):
        results = []
        scorer = DebouncedScorer(results.append, delay=DELAY_S)

        scorer.schedule(NAMED, _role("first"))
        scorer.schedule(NAMED, _role("second"))
        scorer.wait(WAIT_S)

        assert [r.target_id for r in results] == ["second"]

    @pytest.mark.unit
    def test_unnamed_resume_is_suppressed(self):
        results = []
        scorer = DebouncedScorer(results.append, delay=DELAY_S)

        assert scorer.schedule(UNNAMED, _role("first")) is False
        assert not scorer.pending
        assert results == []

    @pytest.mark.unit
    def test_unnamed_resume_cancels_pending_run(self):
        results = []
        scorer = DebouncedScorer(results.append, delay=1.0)

        scorer.schedule(NAMED, _role("first"))
        scorer.schedule(UNNAMED, _role("second"))
        scorer.wait(WAIT_S)

        assert results == []
        assert not scorer.pending

    @pytest.mark.unit
    def test_cancel(self):
        results = []
        scorer = DebouncedScorer(results.append, delay=1.0)

        scorer.schedule(NAMED, _role("first"))
        scorer.cancel()
        scorer.wait(WAIT_S)

        assert results == []

    @pytest.mark.unit
    def test_run_superseded_while_computing_is_discarded(self):
        """A result computed for an outdated request is never delivered."""
        results = []
        engine = BlockingEngine()
        scorer = DebouncedScorer(results.append, delay=DELAY_S, engine=engine)

        scorer.schedule(NAMED, _role("stale"))
        assert engine.entered.wait(WAIT_S)
        stale_timer = scorer._timer

        scorer.schedule(NAMED, _role("fresh"))
        engine.release.set()
        stale_timer.join(WAIT_S)
        scorer.wait(WAIT_S)

        assert [r.target_id for r in results] == ["fresh"]
        assert engine.calls == 2

    @pytest.mark.unit
    def test_scoring_error_is_logged_and_not_delivered(self):
        class FailingEngine(ScoringEngine):
            def score(self, resume, target):
                raise RuntimeError("engine exploded")

        messages = []
        handler_id = logger.add(messages.append, level="ERROR")
        try:
            results = []
            scorer = DebouncedScorer(results.append, delay=DELAY_S, engine=FailingEngine())
            scorer.schedule(NAMED, _role("first"))
            scorer.wait(WAIT_S)
        finally:
            logger.remove(handler_id)

        assert results == []
        assert any("Debounced scoring failed" in m for m in messages)
        assert any("engine exploded" in m for m in messages)

    @pytest.mark.unit
    def test_slow_callback_does_not_block_schedule(self):
        entered = threading.Event()
        release = threading.Event()
        results = []

        def slow_callback(result):
            results.append(result)
            if len(results) == 1:
                entered.set()
                release.wait(WAIT_S)

        scorer = DebouncedScorer(slow_callback, delay=DELAY_S)
        scorer.schedule(NAMED, _role("first"))
        assert entered.wait(WAIT_S)

        caller = threading.Thread(target=scorer.schedule, args=(NAMED, _role("second")))
        caller.start()
        caller.join(1.0)
        blocked = caller.is_alive()

        release.set()
        caller.join(WAIT_S)
        scorer.wait(WAIT_S)

        assert not blocked
        assert [r.target_id for r in results] == ["first", "second"]

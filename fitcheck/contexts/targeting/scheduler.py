"""
Debounced scoring.

Interactive callers re-score whenever the resume or the selected target
changes. DebouncedScorer delays each request and lets only the most recent one
complete: scheduling again cancels the pending timer, and a run that was
already superseded when it fires (or while it computes) never delivers its
result. Scoring errors in the timer thread are logged, not raised, and the
callback runs without holding the scorer's lock.

Usage:
    scorer = DebouncedScorer(on_result=show_result)
    scorer.schedule(resume, role)      # superseded
    scorer.schedule(resume, other)     # only this one is delivered
"""

import os
import threading
from typing import Callable, Optional

from dotenv import load_dotenv

from fitcheck.contexts.intake.resume_data_structure import Resume
from fitcheck.contexts.targeting.logger import _log_debug, _log_exception
from fitcheck.contexts.targeting.result import ScoreResult
from fitcheck.contexts.targeting.scoring import ScoringEngine, Target

load_dotenv()
DEFAULT_DELAY_S = float(os.getenv("FITCHECK_SCORING_DELAY_S", "0.8"))


class DebouncedScorer:
    """
    Cancellable single-shot scoring timer.

    Attributes:
        on_result: Callback receiving each delivered ScoreResult
        delay: Seconds to wait before scoring
        engine: Engine used to score
    """

    def __init__(
        self,
        on_result: Callable[[ScoreResult], None],
        delay: float = DEFAULT_DELAY_S,
        engine: Optional[ScoringEngine] = None,
    ):
        self.on_result = on_result
        self.delay = delay
        self.engine = engine or ScoringEngine()
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        """True while a scheduled run is waiting or running."""
        with self._lock:
            return self._timer is not None and self._timer.is_alive()

    def schedule(self, resume: Resume, target: Target) -> bool:
        """
        Schedule scoring, superseding any earlier request.

        A resume without a profile name has not been parsed yet; scoring is
        suppressed entirely (any pending run is cancelled and nothing is delivered).

        Returns:
            True if a run was scheduled, False if scoring was suppressed
        """
        if not resume.has_name():
            _log_debug("Resume has no name yet, scoring suppressed")
            self.cancel()
            return False

        with self._lock:
            self._generation += 1
            generation = self._generation
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._run, args=(generation, resume, target))
            self._timer.daemon = True
            self._timer.start()

        return True

    def cancel(self) -> None:
        """Cancel the pending run; a run already in progress will not deliver."""
        with self._lock:
            self._generation += 1
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def wait(self, timeout: Optional[float] = None) -> None:
        """Block until the most recently scheduled timer has finished."""
        with self._lock:
            timer = self._timer
        if timer is not None:
            timer.join(timeout)

    def _is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._generation

    def _run(self, generation: int, resume: Resume, target: Target) -> None:
        if not self._is_current(generation):
            return

        try:
            result = self.engine.score(resume, target)
        except Exception:
            # Timer thread: nothing above us to propagate to
            _log_exception(f"Debounced scoring failed for '{getattr(target, 'title', target)}'")
            return

        if not self._is_current(generation):
            _log_debug(f"Discarding superseded result for '{result.target_id}'")
            return

        # Outside _lock: schedule()/cancel() stay callable while the callback runs
        self.on_result(result)

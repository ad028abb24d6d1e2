"""
Portfolio session controller.

Owns the one-time profile load and hands the resulting immutable Profile to
the question router and the job matcher. This is the only place that knows
about the session's state; the contexts themselves are pure functions of the
profile they are given.

Usage:
    from folio.session import PortfolioSession

    session = PortfolioSession()
    session.start()
    if session.load_warning:
        print(session.load_warning)
    print(session.route_question("What are your strengths?"))
    print(session.describe_job_match(job_text))
"""

from pathlib import Path
from typing import Optional, Union

from folio.contexts.assistant import QuestionRouter
from folio.contexts.matching import EmptyJobDescriptionError, MatchResult, analyze
from folio.contexts.presentation import render_load_warning, render_match_result
from folio.contexts.profile import (
    NotLoadedError,
    Profile,
    ProfileLoadResult,
    ProfileStore,
    TimelineKind,
    TimelineView,
    build_timeline,
)
from folio.utils.settings import FolioSettings, load_settings

DATA_NOT_READY = "Error: Profile data not loaded. Please load the profile first."
EMPTY_JOB_PROMPT = "Please paste a job description first."


class PortfolioSession:
    """
    One portfolio session: a single profile load plus on-demand questions and matches.

    Attributes:
        settings: Session settings
        store: Profile store (created from settings.fetch when not given)
        router: Question router configured from settings.assistant/settings.timeline
    """

    def __init__(
        self, settings: Optional[FolioSettings] = None, store: Optional[ProfileStore] = None
    ):
        self.settings = settings or load_settings()
        self.store = store or ProfileStore(
            timeout_seconds=self.settings.fetch.timeout_seconds,
            max_retries=self.settings.fetch.max_retries,
            backoff_seconds=self.settings.fetch.backoff_seconds,
        )
        self.router = QuestionRouter(self.settings.assistant, self.settings.timeline.policy)

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self, source: Optional[Union[str, Path]] = None) -> ProfileLoadResult:
        """
        Load the profile (once). Later calls return the first result.

        Args:
            source: Path or URL; defaults to settings.profile.source
        """
        return self.store.load(source or self.settings.profile.source)

    @property
    def is_ready(self) -> bool:
        return self.store.is_loaded

    @property
    def profile(self) -> Profile:
        """
        The session's profile.

        Raises:
            NotLoadedError: Before start()
        """
        return self.store.get()

    @property
    def load_warning(self) -> Optional[str]:
        """User-visible warning if the load fell back to empty data."""
        if self.store.result is None:
            return None
        return render_load_warning(self.store.result)

    # =========================================================================
    # PROFILE SECTIONS
    # =========================================================================

    def timeline(self, kind: TimelineKind) -> TimelineView:
        """Experience or education section under the configured classification policy."""
        return build_timeline(self.profile.career_timeline, kind, self.settings.timeline.policy)

    # =========================================================================
    # INTERACTIONS
    # =========================================================================

    def route_question(self, question: str) -> str:
        """Answer a question; returns a data-not-ready message before start()."""
        if not self.is_ready:
            return DATA_NOT_READY
        return self.router.route(question, self.profile)

    def analyze_job(self, job_description: str) -> MatchResult:
        """
        Score a job description against the profile.

        Raises:
            EmptyJobDescriptionError: If the description is blank
            NotLoadedError: Before start()
        """
        if not job_description or not job_description.strip():
            raise EmptyJobDescriptionError()
        return analyze(job_description, self.profile)

    def describe_job_match(self, job_description: str) -> str:
        """Display path for job matching: usage problems become messages, not exceptions."""
        try:
            result = self.analyze_job(job_description)
        except EmptyJobDescriptionError:
            return EMPTY_JOB_PROMPT
        except NotLoadedError:
            return DATA_NOT_READY
        return render_match_result(result)

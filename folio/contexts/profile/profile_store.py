"""
One-time loading and caching of the profile document.

The store reads the resume JSON from a local path or an http(s) URL exactly
once. Any failure (unreadable or non-UTF-8 file, request error, non-success
status, invalid JSON) is recovered into an empty fallback Profile; the error travels back to
the caller on the ProfileLoadResult instead of being swallowed.
"""

import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

import httpx

from folio.contexts.profile.exceptions import NotLoadedError, ProfileLoadError
from folio.contexts.profile.logger import (
    _log_debug,
    _log_warning,
    log_load_failure,
    log_load_summary,
)
from folio.contexts.profile.profile_data_structure import Profile

HTTP_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "folio-profile-loader/0.1",
}


@dataclass(frozen=True)
class ProfileLoadResult:
    """
    Outcome of the one-time profile load.

    Attributes:
        profile: Loaded profile, or the empty fallback on failure
        source: Path or URL that was loaded
        success: Whether the document was loaded and parsed
        error: The load error when success is False
    """

    profile: Profile
    source: str
    success: bool
    error: Optional[ProfileLoadError] = None


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def parse_profile_document(text: str, source: str = "") -> Profile:
    """
    Parse profile JSON text into a Profile.

    Raises:
        ProfileLoadError: If the text is not JSON or its root is not an object
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProfileLoadError("Profile document is not valid JSON", source, e) from e

    if not isinstance(data, dict):
        raise ProfileLoadError(
            f"Profile document root must be a JSON object, got {type(data).__name__}", source
        )

    return Profile.from_dict(data)


class ProfileStore:
    """
    Holds the session's profile after a single load.

    Attributes:
        timeout_seconds: Per-request timeout for URL sources
        max_retries: Attempts for URL sources (4xx responses are not retried)
        backoff_seconds: Base delay between attempts, multiplied by attempt number
    """

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        max_retries: int = 3,
        backoff_seconds: float = 1.0,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            timeout_seconds: Per-request timeout for URL sources
            max_retries: Number of fetch attempts for URL sources
            backoff_seconds: Base backoff delay between attempts
            client: Optional pre-configured httpx client (e.g. with a mock transport)
            sleep: Sleep function used for backoff
        """
        self.timeout_seconds = timeout_seconds
        self.max_retries = max(1, max_retries)
        self.backoff_seconds = backoff_seconds
        self._client = client
        self._sleep = sleep
        self._result: Optional[ProfileLoadResult] = None

    @property
    def is_loaded(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Optional[ProfileLoadResult]:
        return self._result

    def load(self, source: Union[str, Path]) -> ProfileLoadResult:
        """
        Load the profile document once and cache the result.

        Later calls return the cached result without touching the source.

        Args:
            source: Filesystem path or http(s) URL of the JSON document

        Returns:
            ProfileLoadResult (fallback profile plus error on failure)
        """
        if self._result is not None:
            _log_debug(f"Profile already loaded from {self._result.source}, reusing it")
            return self._result

        source = str(source)
        try:
            text = self._read_document(source)
            profile = parse_profile_document(text, source)
        except ProfileLoadError as e:
            log_load_failure(source, e)
            self._result = ProfileLoadResult(
                profile=Profile.empty(), source=source, success=False, error=e
            )
        else:
            log_load_summary(source, len(profile.technical_skills), len(profile.career_timeline))
            self._result = ProfileLoadResult(profile=profile, source=source, success=True)

        return self._result

    def get(self) -> Profile:
        """
        Return the cached profile.

        Raises:
            NotLoadedError: If load() has not been called
        """
        if self._result is None:
            raise NotLoadedError()
        return self._result.profile

    # =========================================================================
    # INTERNAL HELPER METHODS
    # =========================================================================

    def _read_document(self, source: str) -> str:
        if is_url(source):
            return self._fetch(source)

        try:
            return Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ProfileLoadError("Could not read profile file", source, e) from e

    def _fetch(self, url: str) -> str:
        if self._client is not None:
            return self._fetch_with(self._client, url)

        with httpx.Client(
            timeout=self.timeout_seconds, follow_redirects=True, headers=HTTP_HEADERS
        ) as client:
            return self._fetch_with(client, url)

    def _fetch_with(self, client: httpx.Client, url: str) -> str:
        last_error: Optional[Exception] = None
        attempt = 0

        for attempt in range(1, self.max_retries + 1):
            try:
                response = client.get(url, timeout=self.timeout_seconds)
                response.raise_for_status()
                return response.text
            except httpx.HTTPStatusError as e:
                last_error = e
                status = e.response.status_code
                _log_warning(f"HTTP {status} fetching {url} (attempt {attempt}/{self.max_retries})")
                if 400 <= status < 500:
                    break  # Client errors will not change on retry
            except httpx.RequestError as e:
                last_error = e
                _log_warning(f"Request failed for {url} (attempt {attempt}/{self.max_retries}): {e}")

            if attempt < self.max_retries:
                self._sleep(self.backoff_seconds * attempt)

        raise ProfileLoadError(
            f"Failed to fetch profile after {attempt} attempt(s)", url, last_error
        )

# least_played/errors.py
from __future__ import annotations


class LeastPlayedError(Exception):
    pass


class DocumentRetrievalFailure(LeastPlayedError):
    """
    The profile page could not be fetched.

    Raised only by document providers; the run boundary logs it and
    ends the run without touching any bot config.
    """

    def __init__(self, url: str, reason: str):
        super().__init__(f"failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason

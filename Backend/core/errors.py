# core/errors.py
# ------------------------------------------------------------------------------
# Failure taxonomy for the guide request. The model SDK gives no stable error
# codes for most failures, so classification checks exception types first and
# then falls back to sniffing the message text (best effort only).
# ------------------------------------------------------------------------------
from __future__ import annotations

import enum
import json
import re

from google.api_core import exceptions as core_exceptions
from google.generativeai.types import BlockedPromptException, StopCandidateException
from pydantic import ValidationError


class GuideErrorKind(str, enum.Enum):
    API_KEY_INVALID = "API_KEY_INVALID"
    NETWORK_ERROR = "NETWORK_ERROR"
    SAFETY_BLOCK = "SAFETY_BLOCK"
    NO_CONTENT_GENERATED = "NO_CONTENT_GENERATED"
    GENERIC_ERROR = "GENERIC_ERROR"


USER_MESSAGES = {
    GuideErrorKind.API_KEY_INVALID: "Missing or invalid API Key. Please check your configuration.",
    GuideErrorKind.NETWORK_ERROR: "Network connection failed. Please check your internet.",
    GuideErrorKind.SAFETY_BLOCK: "The AI flagged the request as unsafe. Please try a different destination.",
    GuideErrorKind.NO_CONTENT_GENERATED: "We couldn't generate a guide for this location. Try a major city.",
    GuideErrorKind.GENERIC_ERROR: "An unexpected error occurred. Please try again later.",
}


def user_message(kind: GuideErrorKind) -> str:
    return USER_MESSAGES.get(kind, USER_MESSAGES[GuideErrorKind.GENERIC_ERROR])


class EmptyResponseError(Exception):
    """The model answered with an empty body."""


class GuideError(Exception):
    """A classified guide failure. Callers only look at `kind`."""

    def __init__(self, kind: GuideErrorKind, cause: BaseException | None = None):
        super().__init__(kind.value)
        self.kind = kind
        self.cause = cause

    @property
    def message(self) -> str:
        return user_message(self.kind)


_KEY_ERRORS = (core_exceptions.PermissionDenied, core_exceptions.Unauthenticated)
_NETWORK_ERRORS = (
    ConnectionError,
    TimeoutError,
    core_exceptions.ServiceUnavailable,
    core_exceptions.DeadlineExceeded,
)
_SAFETY_ERRORS = (BlockedPromptException, StopCandidateException)
# Malformed bodies: their messages quote the payload, so no text sniffing
_PARSE_ERRORS = (json.JSONDecodeError, ValidationError)
_STATUS_403 = re.compile(r"\b403\b")


def classify_error(exc: BaseException) -> GuideErrorKind:
    if isinstance(exc, GuideError):
        return exc.kind
    if isinstance(exc, _KEY_ERRORS):
        return GuideErrorKind.API_KEY_INVALID
    if isinstance(exc, _NETWORK_ERRORS):
        return GuideErrorKind.NETWORK_ERROR
    if isinstance(exc, EmptyResponseError):
        return GuideErrorKind.NO_CONTENT_GENERATED
    if isinstance(exc, _SAFETY_ERRORS):
        return GuideErrorKind.SAFETY_BLOCK
    if isinstance(exc, _PARSE_ERRORS):
        return GuideErrorKind.GENERIC_ERROR

    # Compatibility heuristic on the message text, same order as above
    text = f"{type(exc).__name__}: {exc}"
    if "API key" in text or _STATUS_403.search(text):
        return GuideErrorKind.API_KEY_INVALID
    if "Failed to fetch" in text or "NetworkError" in text:
        return GuideErrorKind.NETWORK_ERROR
    if "candidate" in text or "safety" in text.lower():
        return GuideErrorKind.SAFETY_BLOCK
    return GuideErrorKind.GENERIC_ERROR

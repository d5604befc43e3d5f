"""Value objects describing the authenticated caller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentUser:
    """The caller of the current request.

    Resolved once per request from the verified bearer token and passed
    explicitly into every application service call.
    """

    username: str

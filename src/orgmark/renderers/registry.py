#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/renderers/registry.py
"""Registry of the rendering profiles available by name."""

from __future__ import annotations

import logging

from orgmark.exceptions import ValidationError
from orgmark.renderers.bbcode import BBCODE_PROFILE
from orgmark.renderers.html import HTML_PROFILE
from orgmark.renderers.profile import RenderingProfile

logger = logging.getLogger(__name__)

_PROFILES: dict[str, RenderingProfile] = {
    HTML_PROFILE.name: HTML_PROFILE,
    BBCODE_PROFILE.name: BBCODE_PROFILE,
}


def register_profile(profile: RenderingProfile, replace: bool = False) -> None:
    """Make a profile available to :func:`get_profile`.

    Parameters
    ----------
    profile : RenderingProfile
        Profile to register under ``profile.name``
    replace : bool, default False
        Allow replacing an existing profile of the same name

    Raises
    ------
    ValidationError
        If a profile with that name exists and ``replace`` is False

    """
    if profile.name in _PROFILES and not replace:
        raise ValidationError(
            f"Profile '{profile.name}' is already registered", parameter_name="profile", parameter_value=profile.name
        )
    _PROFILES[profile.name] = profile
    logger.debug("Registered rendering profile '%s'", profile.name)


def get_profile(name: str) -> RenderingProfile:
    """Look up a registered profile by name.

    Raises
    ------
    ValidationError
        If no profile has that name

    """
    try:
        return _PROFILES[name]
    except KeyError:
        available = ", ".join(sorted(_PROFILES))
        raise ValidationError(
            f"Unknown profile '{name}'. Available profiles: {available}",
            parameter_name="profile",
            parameter_value=name,
        ) from None


def list_profiles() -> list[str]:
    """Return the names of all registered profiles, sorted."""
    return sorted(_PROFILES)

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/renderers/__init__.py
"""Transcoding engine and rendering profiles.

- engine: post-order tree walk, run context and the ``transcode`` entry point
- profile: the ``RenderingProfile`` data model and per-kind policies
- handlers: node handlers shared by all dialects
- tags: tag formatting helpers
- html, bbcode: the two built-in dialects
- registry: lookup of profiles by name
"""

from orgmark.renderers.bbcode import BBCODE_PROFILE
from orgmark.renderers.engine import RunContext, TranscodingEngine, transcode
from orgmark.renderers.html import HTML_PROFILE
from orgmark.renderers.profile import Handler, LinkPolicy, NodePolicy, RenderingProfile
from orgmark.renderers.registry import get_profile, list_profiles, register_profile

__all__ = [
    "BBCODE_PROFILE",
    "HTML_PROFILE",
    "Handler",
    "LinkPolicy",
    "NodePolicy",
    "RenderingProfile",
    "RunContext",
    "TranscodingEngine",
    "get_profile",
    "list_profiles",
    "register_profile",
    "transcode",
]

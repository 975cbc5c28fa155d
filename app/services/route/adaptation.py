"""Preference-driven rewording of a template's summary and tip."""
from __future__ import annotations

import re
from typing import Dict, Optional, Pattern, Tuple

NATURE_TIP = "Look out for local wildlife - bring a camera!"
URBAN_TIP = "Early mornings are best to avoid pedestrian traffic in urban areas."

# preference -> (pattern, replacement, tip)
_ADAPTATIONS: Dict[str, Tuple[Pattern[str], str, str]] = {
    "nature": (
        re.compile(r"path|route", re.IGNORECASE),
        "trail through lush greenery",
        NATURE_TIP,
    ),
    "urban": (
        re.compile(r"park|garden|forest", re.IGNORECASE),
        "vibrant city streets",
        URBAN_TIP,
    ),
}


def adapt_route_text(summary: str, tip: str, preference: Optional[str]) -> Tuple[str, str]:
    """
    Reword summary and tip for a preference.

    Only the first match in the summary is replaced. When nothing matches the
    summary comes back unchanged but the themed tip still applies. Preferences
    without an adaptation (loop, flat, hills, scenic, None) return the inputs.

    Returns:
        (summary, tip)
    """
    adaptation = _ADAPTATIONS.get(preference or "")
    if adaptation is None:
        return summary, tip

    pattern, replacement, themed_tip = adaptation
    return pattern.sub(replacement, summary, count=1), themed_tip

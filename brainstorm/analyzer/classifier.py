"""Rule-based idea classifier.

Maps raw idea text onto one of the fixed archetypes using plain substring
matching -- no AI calls.  Keyword groups are tested in order and the first
group with a hit wins, so an idea mentioning both "shop" and "community" is
a commerce idea.
"""

from __future__ import annotations

from .archetypes import TEMPLATES
from .models import Archetype, ProjectAnalysis


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Order matters: first matching group wins.
_KEYWORD_GROUPS: tuple[tuple[Archetype, tuple[str, ...]], ...] = (
    (Archetype.COMMERCE, ("ecommerce", "shop", "store")),
    (Archetype.SOCIAL, ("social", "chat", "community")),
    (Archetype.ANALYTICS, ("dashboard", "analytics", "data")),
)


def detect_archetype(idea_text: str) -> Archetype:
    """Return the archetype whose keywords first appear in *idea_text*.

    Examples:
        'An online shop for plants' -> Archetype.COMMERCE
        'Community chat for gamers' -> Archetype.SOCIAL
        'Sales analytics dashboard' -> Archetype.ANALYTICS
        'A recipe planner' -> Archetype.GENERIC
    """
    lower = idea_text.lower()
    for archetype, keywords in _KEYWORD_GROUPS:
        if any(keyword in lower for keyword in keywords):
            return archetype
    return Archetype.GENERIC


def classify(idea_text: str) -> ProjectAnalysis:
    """Classify *idea_text* and return the archetype's analysis.

    The caller must not pass blank text; the session layer rejects it before
    this function is reached.  Apart from choosing the archetype the idea
    text has no influence on the result.
    """
    return TEMPLATES[detect_archetype(idea_text)]

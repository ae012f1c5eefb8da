"""Common English function words that carry no weight when comparing answers."""

_CONJUNCTIONS = """
    after although and because before but either for if neither nor once or
    since so than though unless until when where whether while yet
"""

_DETERMINERS = """
    a all an another any each every few many most several some such the
"""

_PRONOUNS = """
    he her hers herself him himself his i it its itself me my myself our ours
    ourselves she that their theirs them themselves these they this those we
    what whatever which whichever who whoever whom whomever whose you your
    yours yourself yourselves
"""

_PREPOSITIONS = """
    about above across after against along among around as at before behind
    below beneath beside between beyond by despite down during except for from
    in inside into like near of off on onto opposite out outside over past per
    regarding round since through throughout till to toward towards under
    underneath unlike until up upon versus via with within without
"""

_AUXILIARIES = """
    am are be been being can could dare did do does had has have having is may
    might must need ought shall should was were will would
"""

_NEGATIONS = """
    barely hardly neither never no nobody none nor not nothing nowhere
    scarcely without
"""

# Multi-word entries; text is split on non-alphanumerics before lookup,
# so these only match when checked directly.
_PHRASES = (
    "both...and",
    "even though",
    "in order that",
    "not only...but also",
    "rather than",
    "used to",
)

IGNORE_WORDS: tuple[str, ...] = tuple(
    word
    for group in (
        _CONJUNCTIONS,
        _DETERMINERS,
        _PRONOUNS,
        _PREPOSITIONS,
        _AUXILIARIES,
        _NEGATIONS,
    )
    for word in group.split()
) + _PHRASES

_IGNORED = frozenset(IGNORE_WORDS)


def is_ignored(word: str) -> bool:
    """Return True if ``word`` is exactly one of the ignored words (case-sensitive)."""
    return word in _IGNORED
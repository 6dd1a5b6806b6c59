"""Fuzzy suggestions for mistyped location names.

When a caller asks for a location that does not exist, the closest
registered names are offered instead. Uses rapidfuzz for the fuzzy
matching, comparing lower-cased names so that casing never affects the
score.

Example
-------
    >>> suggest_locations("Mumbay", ["Mumbai", "Delhi", "Chennai"])
    ['Mumbai']
"""

from typing import Iterable, List

from rapidfuzz import fuzz, process

# Minimum similarity score (0-100) to consider a match
MIN_SIMILARITY_SCORE = 60.0


def suggest_locations(
    query: str,
    candidates: Iterable[str],
    limit: int = 3,
    score_cutoff: float = MIN_SIMILARITY_SCORE,
) -> List[str]:
    """Return up to ``limit`` candidate names that resemble ``query``.

    Parameters
    ----------
    query : str
        The name the caller typed
    candidates : Iterable[str]
        Canonical location names to choose from
    limit : int
        Maximum number of suggestions
    score_cutoff : float
        Minimum rapidfuzz score for a candidate to be suggested

    Returns
    -------
    List[str]
        Canonical names, best match first
    """
    query = query.strip().lower()
    names = list(candidates)
    if not query or not names:
        return []

    matches = process.extract(
        query,
        [name.lower() for name in names],
        scorer=fuzz.WRatio,
        limit=limit,
        score_cutoff=score_cutoff,
    )
    # extract() on a list yields (choice, score, index)
    return [names[index] for _, _, index in matches]

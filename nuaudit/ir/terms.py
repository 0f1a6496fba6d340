"""
Term IDs — The registrar's numeric encoding of an academic term.

A term ID is "20" + two-digit year + a two-digit season suffix.
Fall belongs to the following academic year, so FL21 is 202210
while SP21 is 202130.
"""

from nuaudit.ir.enums import Season

# Suffix appended after the four-digit year
SEASON_SUFFIX = {
    Season.FALL: 10,
    Season.SPRING: 30,
    Season.SUMMER1: 40,
    Season.FULL_SUMMER: 50,
    Season.SUMMER2: 60,
}

# Seasons labeled by the next calendar year
NEXT_YEAR_SEASONS = frozenset({Season.FALL})


def term_id(season: Season, year: int) -> int:
    """
    Encode a season and two-digit year as a term ID.

    Args:
        season: Term season
        year: Two-digit year (0-99), as printed in the audit

    Returns:
        Integer term ID, e.g. term_id(Season.SPRING, 21) == 202130

    Raises:
        ValueError: If year is outside 0-99
    """
    if not 0 <= year <= 99:
        raise ValueError(f"Term year must be two digits, got {year}")

    offset = 1 if season in NEXT_YEAR_SEASONS else 0
    return (2000 + year + offset) * 100 + SEASON_SUFFIX[season]

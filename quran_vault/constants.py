"""Fixed dimensions of the Madani Mushaf."""

TOTAL_SURAHS = 114
TOTAL_PAGES = 604
TOTAL_JUZ = 30

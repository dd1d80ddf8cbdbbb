"""Centralized configuration for the padlock word finder."""

# ============================================================================
# ALPHABET SETTINGS
# ============================================================================
ALPHABET_LENGTH = 26  # Wheels only carry the letters a-z
MAX_WORD_LENGTH = 255  # Longest dictionary line accepted

# ============================================================================
# PATH SETTINGS
# ============================================================================
# Both files are looked up relative to the working directory.
WHEELS_PATH = "wheels.txt"
DICTIONARY_PATH = "dictionary.txt"

# ============================================================================
# OUTPUT SETTINGS
# ============================================================================
SUMMARY_TEMPLATE = "Found {total} words."
ERROR_PREFIX = "ERROR: "
PAUSE_PROMPT = "Hit enter to exit."

# ============================================================================
# FILE SETTINGS
# ============================================================================
# Input files are ASCII. Stray bytes decode to lone surrogates, which are
# never letters, so they fail validation instead of aborting the read.
FILE_ENCODING = "ascii"
FILE_ERRORS = "surrogateescape"

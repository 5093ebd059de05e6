"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Post field lengths
MIN_POST_TITLE_LENGTH = 5
MAX_POST_TITLE_LENGTH = 100
MIN_POST_CONTENT_LENGTH = 10
MAX_POST_CONTENT_LENGTH = 300

# Comment field lengths
MIN_COMMENT_CONTENT_LENGTH = 1
MAX_COMMENT_CONTENT_LENGTH = 100

# Pagination defaults
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Logging
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

"""Input sanitization package."""

from meeting_cost.validation.sanitizer import DEFAULT_MAX_LENGTH, sanitize_string

__all__ = ["DEFAULT_MAX_LENGTH", "sanitize_string"]

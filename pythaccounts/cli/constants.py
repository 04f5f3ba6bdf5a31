"""Exit codes shared by CLI commands."""

VALIDATION_EXIT_CODE = 2
DECODE_ERROR_EXIT_CODE = 3

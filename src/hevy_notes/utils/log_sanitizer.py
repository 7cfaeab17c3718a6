"""Log sanitization filter to keep the Hevy API key out of logs.

The filter redacts, before a record is emitted:
- The configured API key, wherever it appears
- ``api-key`` header and field values
- Bearer/authorization/secret/token values

Workout ids are UUIDs like the key itself, so bare UUIDs are left alone.

Usage:
    from hevy_notes.utils.log_sanitizer import install_log_sanitizer

    install_log_sanitizer(secrets=[settings.api_key])
"""

import logging
import re
from typing import Any, Iterable

# "name: value", "name=value", "'name': 'value'" forms
_FIELD_VALUE = r'["\']?\s*[:=]\s*["\']?'

KEY_PLACEHOLDER = "[REDACTED_API_KEY]"


class LogSanitizationFilter(logging.Filter):
    """Logging filter that redacts credentials from log messages."""

    PATTERNS: list[tuple[re.Pattern, str]] = [
        (re.compile(r'(api[-_]?key' + _FIELD_VALUE + r')[^"\'&\s,}]+', re.IGNORECASE), r'\1[REDACTED]'),
        (re.compile(r'Bearer\s+[\w\-.]+', re.IGNORECASE), 'Bearer [REDACTED_TOKEN]'),
        (
            re.compile(r'((?:authorization|secret|token)' + _FIELD_VALUE + r')[^"\'&\s]+', re.IGNORECASE),
            r'\1[REDACTED]',
        ),
    ]

    def __init__(self, secrets: Iterable[str] = ()) -> None:
        """Initialize the filter.

        Args:
            secrets: Literal values to redact anywhere in a record, e.g. the
                configured API key. Blank values are ignored.
        """
        super().__init__()
        self.secrets = [s for s in secrets if s]

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact the message and its args in place; never drops the record."""
        if record.msg:
            record.msg = self._sanitize(str(record.msg))
        if record.args:
            record.args = self._sanitize_args(record.args)
        return True

    def _sanitize(self, text: str) -> str:
        for secret in self.secrets:
            text = text.replace(secret, KEY_PLACEHOLDER)
        for pattern, replacement in self.PATTERNS:
            text = pattern.sub(replacement, text)
        return text

    def _sanitize_args(self, args: Any) -> Any:
        if isinstance(args, str):
            return self._sanitize(args)
        if isinstance(args, dict):
            return {key: self._sanitize_args(value) for key, value in args.items()}
        if isinstance(args, tuple):
            return tuple(self._sanitize_args(arg) for arg in args)
        if isinstance(args, list):
            return [self._sanitize_args(arg) for arg in args]

        # Numbers and other objects keep their type unless their text needs redacting
        text = str(args)
        redacted = self._sanitize(text)
        return args if redacted == text else redacted


def install_log_sanitizer(logger_name: str | None = None, secrets: Iterable[str] = ()) -> None:
    """Attach a LogSanitizationFilter.

    Args:
        logger_name: Logger to protect. Defaults to the root logger, in which
            case the root's current handlers get the filter too, since records
            propagated from child loggers only pass through handler filters.
        secrets: Literal values to redact, e.g. the configured API key.
    """
    sanitizer = LogSanitizationFilter(secrets)
    logger = logging.getLogger(logger_name)
    logger.addFilter(sanitizer)

    if logger_name is None:
        for handler in logger.handlers:
            handler.addFilter(sanitizer)


def sanitize_string(text: str, secrets: Iterable[str] = ()) -> str:
    """Redact credentials from arbitrary text, e.g. before printing it."""
    return LogSanitizationFilter(secrets)._sanitize(text)

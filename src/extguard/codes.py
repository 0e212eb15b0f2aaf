"""Issue level and code constants for extguard reports.

These constants prevent stringly-typed levels and codes and ensure
client code partitions issues the same way the analyzer emits them.
"""

from enum import Enum


class IssueLevel(str, Enum):
    """Severity of an issue.

    error blocks the "ready to install" state, warning is surfaced but
    non-blocking, info is advisory only.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueCode(str, Enum):
    """Rule that produced an issue."""

    # Terminal (short-circuit all passes)
    MANIFEST_MISSING = "MANIFEST_MISSING"
    MANIFEST_PARSE_ERROR = "MANIFEST_PARSE_ERROR"

    # Schema compliance
    UNSUPPORTED_MANIFEST_VERSION = "UNSUPPORTED_MANIFEST_VERSION"
    MISSING_NAME = "MISSING_NAME"
    MISSING_VERSION = "MISSING_VERSION"
    MISSING_DESCRIPTION = "MISSING_DESCRIPTION"
    MISSING_ICON = "MISSING_ICON"
    DEPRECATED_FIELD = "DEPRECATED_FIELD"
    INVALID_FIELD_TYPE = "INVALID_FIELD_TYPE"

    # Permission policy
    BROAD_PERMISSION = "BROAD_PERMISSION"
    SENSITIVE_COMBINATION = "SENSITIVE_COMBINATION"
    WILDCARD_HOST_PERMISSION = "WILDCARD_HOST_PERMISSION"
    UNKNOWN_PERMISSION = "UNKNOWN_PERMISSION"

    # Referential integrity
    MISSING_REFERENCED_FILE = "MISSING_REFERENCED_FILE"
    ORPHANED_FILE = "ORPHANED_FILE"

    # Security scan
    DYNAMIC_CODE_EXECUTION = "DYNAMIC_CODE_EXECUTION"
    UNSAFE_DOM_SINK = "UNSAFE_DOM_SINK"
    BASE64_DECODE = "BASE64_DECODE"
    COOKIE_ACCESS = "COOKIE_ACCESS"
    KEYBOARD_LISTENER = "KEYBOARD_LISTENER"
    CREDENTIAL_IDENTIFIER = "CREDENTIAL_IDENTIFIER"
    NETWORK_CALL = "NETWORK_CALL"
    REMOTE_SCRIPT = "REMOTE_SCRIPT"

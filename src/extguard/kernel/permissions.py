"""Permission catalog and permission policy pass.

The catalog is closed: an identifier outside it is suspicious but only a
warning, since the catalog may lag new browser capabilities. Wildcard host
access is never acceptable and is an error.
"""

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping

from extguard.codes import IssueCode, IssueLevel
from extguard.contracts import Issue
from .manifest import declared_host_permissions, declared_permissions


ALL_URLS = "<all_urls>"

PERMISSION_CATALOG: Mapping[str, str] = MappingProxyType({
    "activeTab": "Accesses the currently active tab when you click the extension",
    "alarms": "Can schedule periodic tasks",
    "background": "Can keep running in the background after the browser window closes",
    "bookmarks": "Can read and modify your bookmarks",
    "browsingData": "Can clear your browsing data",
    "clipboardRead": "Can read data you copy to the clipboard",
    "clipboardWrite": "Can write data to the clipboard",
    "contentSettings": "Can change per-site settings such as cookies, JavaScript and plugins",
    "contextMenus": "Adds items to the right-click menu",
    "cookies": "Can read and modify cookies",
    "debugger": "Can attach the debugger to tabs and inspect their internals",
    "declarativeContent": "Can act on page content without reading it",
    "declarativeNetRequest": "Can block or modify network requests",
    "declarativeNetRequestFeedback": "Can see which network request rules matched",
    "desktopCapture": "Can capture the content of your screen",
    "downloads": "Can manage downloads",
    "geolocation": "Can access your location",
    "history": "Can access your browsing history",
    "identity": "Can sign you in and obtain OAuth tokens",
    "idle": "Can detect when your machine is idle",
    "management": "Can manage other installed extensions",
    "nativeMessaging": "Can communicate with native applications on your computer",
    "notifications": "Can show desktop notifications",
    "offscreen": "Can create offscreen documents",
    "pageCapture": "Can save pages as MHTML",
    "proxy": "Can change your proxy settings",
    "scripting": "Can inject scripts into web pages",
    "sessions": "Can query and restore recently closed tabs and windows",
    "sidePanel": "Can show content in the browser side panel",
    "storage": "Stores data locally in your browser",
    "tabCapture": "Can capture the content of tabs",
    "tabGroups": "Can organize your tabs into groups",
    "tabs": "Can see your open tabs and their URLs",
    "topSites": "Can read your most visited sites",
    "unlimitedStorage": "Can store an unlimited amount of local data",
    "webNavigation": "Can observe page navigation events",
    "webRequest": "Can observe and modify network requests",
    ALL_URLS: "Can access all websites (very broad)",
})

# Host patterns that grant access to every site
WILDCARD_HOST_PATTERNS: FrozenSet[str] = frozenset({
    "*://*/*",
    "http://*/*",
    "https://*/*",
    ALL_URLS,
})

# Permission pairs that are sensitive when declared together
SENSITIVE_COMBINATIONS = (
    (("tabs", "history"), "tabs and browsing history"),
)


def describe_permission(permission: str) -> str:
    """Return the human description of a permission, or the identifier itself."""
    return PERMISSION_CATALOG.get(permission, permission)


def is_known_permission(permission: str) -> bool:
    return permission in PERMISSION_CATALOG


def check_permissions(manifest: Dict[str, Any]) -> List[Issue]:
    """Apply the permission policy to the declared permission lists."""
    issues: List[Issue] = []
    permissions = declared_permissions(manifest)
    host_permissions = declared_host_permissions(manifest)

    if ALL_URLS in permissions:
        issues.append(Issue(
            level=IssueLevel.ERROR,
            code=IssueCode.BROAD_PERMISSION,
            message=f"Uses {ALL_URLS}: overly broad access to every website",
            path="permissions",
        ))

    declared = set(permissions)
    for pair, label in SENSITIVE_COMBINATIONS:
        if declared.issuperset(pair):
            issues.append(Issue(
                level=IssueLevel.WARNING,
                code=IssueCode.SENSITIVE_COMBINATION,
                message=f"Sensitive combination: accesses {label} ({' + '.join(pair)})",
                path="permissions",
            ))

    for pattern in host_permissions:
        if pattern in WILDCARD_HOST_PATTERNS:
            issues.append(Issue(
                level=IssueLevel.ERROR,
                code=IssueCode.WILDCARD_HOST_PERMISSION,
                message=f"Overly broad wildcard host permission: {pattern}",
                path="host_permissions",
            ))

    for permission in permissions:
        if not is_known_permission(permission):
            issues.append(Issue(
                level=IssueLevel.WARNING,
                code=IssueCode.UNKNOWN_PERMISSION,
                message=f"Unknown permission: {permission}",
                path="permissions",
            ))

    return issues

"""Extension type classification."""

from typing import Any, Dict

from extguard.contracts import ExtensionType
from .manifest import non_blank, section


def classify_surfaces(
    has_content_scripts: bool,
    has_popup: bool,
    has_background: bool,
) -> ExtensionType:
    """Map surface flags to a type; first match wins.

    hybrid > content_script > popup > background > unknown. Background is the
    weakest signal and never wins over a visible or injected surface.
    """
    if has_content_scripts and has_popup:
        return "hybrid"
    if has_content_scripts:
        return "content_script"
    if has_popup:
        return "popup"
    if has_background:
        return "background"
    return "unknown"


def _declared(value: Any) -> bool:
    """JSON truthiness: empty arrays and objects still count as declared."""
    if isinstance(value, (list, dict)):
        return True
    return bool(value)


def classify(manifest: Dict[str, Any]) -> ExtensionType:
    """Classify a parsed manifest.

    Any declared ``content_scripts`` (even ``[]``) is a content-script
    surface. An ``action`` without ``default_popup`` is not a surface of its
    own.
    """
    return classify_surfaces(
        has_content_scripts=_declared(manifest.get("content_scripts")),
        has_popup=non_blank(section(manifest, "action").get("default_popup")),
        has_background=non_blank(section(manifest, "background").get("service_worker")),
    )

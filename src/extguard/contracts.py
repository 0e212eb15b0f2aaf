"""Public models for extguard: artifacts, issues and reports."""

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from extguard.codes import IssueCode, IssueLevel


ExtensionType = Literal["content_script", "popup", "background", "hybrid", "unknown"]


class Artifact(BaseModel):
    """One named text file belonging to an extension package."""
    name: str  # Relative path, case-sensitive, e.g. "content.js" or "icons/icon16.png"
    content: str

    model_config = ConfigDict(frozen=True)


class Issue(BaseModel):
    """A single finding about a package."""
    level: IssueLevel
    code: IssueCode
    message: str
    path: Optional[str] = None  # Offending artifact name or manifest path, when there is one

    model_config = ConfigDict(frozen=True, use_enum_values=True)


class Report(BaseModel):
    """Result of analyzing one package.

    Always recomputed from scratch; consumers partition ``issues`` by level
    rather than relying on position.
    """
    type: ExtensionType = "unknown"
    permissions: List[str] = Field(default_factory=list)  # As declared: order and duplicates preserved
    issues: List[Issue] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def _by_level(self, level: IssueLevel) -> List[Issue]:
        return [issue for issue in self.issues if issue.level == level.value]

    @property
    def errors(self) -> List[Issue]:
        return self._by_level(IssueLevel.ERROR)

    @property
    def warnings(self) -> List[Issue]:
        return self._by_level(IssueLevel.WARNING)

    @property
    def infos(self) -> List[Issue]:
        return self._by_level(IssueLevel.INFO)

    @property
    def ok(self) -> bool:
        """True if no error-level issues (warnings and info don't block)."""
        return not self.errors

    @property
    def is_ready(self) -> bool:
        return self.ok

    @property
    def needs_fix(self) -> bool:
        """True if the automatic-fix action applies (any error-level issue)."""
        return not self.ok

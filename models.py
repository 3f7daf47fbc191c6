# models.py
"""
Data models used by the validator.

- Simple dataclasses giving a read-only view over a resolved deployment description.
- Violation carries the rule name and entity alongside the message for reports.
- ConventionsError is the single aggregate failure surfaced to the host.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from config import CONFIG_KEY, IGNORE_KEY

logger = logging.getLogger(__name__)


class ConventionsError(Exception):
    """Raised once per run when one or more naming conventions are broken."""

    def __init__(self, violations: List["Violation"]):
        self.violations = list(violations)
        super().__init__(
            "Naming convention check failed:\n"
            + "\n".join(f"- {v.message}" for v in self.violations)
        )


class ConfigurationError(ValueError):
    """Raised when the deployment description or the ignore block is malformed."""


@dataclass(frozen=True)
class FunctionDescriptor:
    """
    A declared function.

    Fields:
    - logical_name: key as declared under `functions`
    - qualified_name: resolved deployed name, normally "service-stage-logical"
    - handler: handler reference such as "src/do-thing.handler" (None if missing)
    """
    logical_name: str
    qualified_name: str
    handler: Optional[str] = None


@dataclass(frozen=True)
class ResourceDescriptor:
    logical_id: str
    resource_type: str
    properties: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BuildTarget:
    """Provider runtime (e.g. "nodejs14.x") and optional bundler target (e.g. "node14")."""
    runtime: Optional[str] = None
    bundler_target: Optional[str] = None


@dataclass(frozen=True)
class SuppressionConfig:
    """
    Per-rule ignore flags. False (the default) means the rule runs.

    Attribute names are the keys users write under `custom.conventions.ignore`.
    """
    serviceName: bool = False
    stageName: bool = False
    handlerName: bool = False
    functionName: bool = False
    handlerNameMatchesFunction: bool = False
    dynamoDBTableName: bool = False
    parameterName: bool = False
    runtimeVersion: bool = False

    @classmethod
    def rule_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SuppressionConfig":
        """Build from the `ignore` mapping; None or {} leaves every rule enabled."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"custom.{CONFIG_KEY}.{IGNORE_KEY} must be a mapping, got {type(data).__name__}"
            )
        known = set(cls.rule_names())
        flags: Dict[str, bool] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Unknown rule in custom.%s.%s: %s", CONFIG_KEY, IGNORE_KEY, key)
                continue
            if value is None:
                continue
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"custom.{CONFIG_KEY}.{IGNORE_KEY}.{key} must be true or false, got {value!r}"
                )
            flags[key] = value
        return cls(**flags)

    def is_ignored(self, rule_name: str) -> bool:
        return bool(getattr(self, rule_name, False))


@dataclass(frozen=True)
class DeploymentDescription:
    """Snapshot of everything one validation run reads."""
    service: str
    stage: str
    functions: List[FunctionDescriptor] = field(default_factory=list)
    resources: List[ResourceDescriptor] = field(default_factory=list)
    build_target: BuildTarget = field(default_factory=BuildTarget)
    suppression: SuppressionConfig = field(default_factory=SuppressionConfig)


def resources_from_dict(resources: Dict[str, Any]) -> List[ResourceDescriptor]:
    if not isinstance(resources, dict):
        raise ConfigurationError("`resources.Resources` must be a mapping of logical id to resource")
    result: List[ResourceDescriptor] = []
    for logical_id, resource in resources.items():
        resource = resource or {}
        result.append(ResourceDescriptor(
            logical_id=logical_id,
            resource_type=resource.get("Type", ""),
            properties=dict(resource.get("Properties") or {}),
        ))
    return result


@dataclass
class Violation:
    """
    A single broken naming rule.

    Fields:
    - rule: rule name as used in the ignore block (e.g. "serviceName")
    - resource: entity the rule was checked against (service, function key, logical id ...)
    - message: human-readable sentence shown to the user
    """
    rule: str
    resource: str
    message: str


@dataclass
class ValidationReport:
    violations: List[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    @property
    def messages(self) -> List[str]:
        return [v.message for v in self.violations]

    def extend(self, rule: str, resource: str, messages: List[str]) -> None:
        for message in messages:
            self.violations.append(Violation(rule=rule, resource=resource, message=message))

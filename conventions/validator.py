# conventions/validator.py
"""
Rule registry and the validation pass.

- RULES lists every rule once, in the order messages are reported.
- validate() runs the enabled rules over a DeploymentDescription and collects
  all violations; it never raises for a broken convention.
- run_convention_check() is the host-facing entry point: it logs the outcome
  and raises a single ConventionsError when anything was found.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from config import DYNAMODB_TABLE_TYPE, SSM_PARAMETER_TYPE
from conventions import rules
from models import (
    ConventionsError,
    DeploymentDescription,
    FunctionDescriptor,
    ResourceDescriptor,
    ValidationReport,
)

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Convention check complete! No errors were found."


class Rule(str, Enum):
    """Rule names; the values are the keys accepted under `custom.conventions.ignore`."""
    SERVICE_NAME = "serviceName"
    STAGE_NAME = "stageName"
    HANDLER_NAME = "handlerName"
    FUNCTION_NAME = "functionName"
    HANDLER_NAME_MATCHES_FUNCTION = "handlerNameMatchesFunction"
    DYNAMODB_TABLE_NAME = "dynamoDBTableName"
    PARAMETER_NAME = "parameterName"
    RUNTIME_VERSION = "runtimeVersion"


class Scope(str, Enum):
    SERVICE = "service"
    FUNCTION = "function"
    RESOURCE = "resource"
    BUILD = "build"


@dataclass(frozen=True)
class RuleEntry:
    """
    One registry entry.

    - scope decides what the check is fed (the whole description, each function,
      each resource, or the build target).
    - applies filters resources by type; other scopes ignore it.
    - check receives (item, description) and returns messages.
    """
    rule: Rule
    scope: Scope
    check: Callable[..., List[str]]
    applies: Optional[Callable[[ResourceDescriptor], bool]] = None


def _resource_of_type(resource_type: str) -> Callable[[ResourceDescriptor], bool]:
    return lambda resource: resource.resource_type == resource_type


def _check_parameter_resource(resource: ResourceDescriptor, d: DeploymentDescription) -> List[str]:
    name = resource.properties.get("Name")
    if not name:
        return [f'Parameter "{resource.logical_id}" has no parameter name defined']
    return rules.check_parameter_name(str(name), d.service)


RULES = (
    RuleEntry(Rule.SERVICE_NAME, Scope.SERVICE,
              lambda _, d: rules.check_service_name(d.service)),
    RuleEntry(Rule.STAGE_NAME, Scope.SERVICE,
              lambda _, d: rules.check_stage_name(d.stage)),
    RuleEntry(Rule.HANDLER_NAME, Scope.FUNCTION,
              lambda fn, d: rules.check_handler_name(fn)),
    RuleEntry(Rule.FUNCTION_NAME, Scope.FUNCTION,
              lambda fn, d: rules.check_function_name(fn, d.service, d.stage)),
    RuleEntry(Rule.HANDLER_NAME_MATCHES_FUNCTION, Scope.FUNCTION,
              lambda fn, d: rules.check_handler_name_matches_function(fn, d.service, d.stage)),
    RuleEntry(Rule.DYNAMODB_TABLE_NAME, Scope.RESOURCE,
              lambda res, d: rules.check_dynamodb_table_name(res, d.service),
              applies=_resource_of_type(DYNAMODB_TABLE_TYPE)),
    RuleEntry(Rule.PARAMETER_NAME, Scope.RESOURCE,
              _check_parameter_resource,
              applies=_resource_of_type(SSM_PARAMETER_TYPE)),
    RuleEntry(Rule.RUNTIME_VERSION, Scope.BUILD,
              lambda build, d: rules.check_runtime_version(build.runtime, build.bundler_target)),
)


def _enabled(description: DeploymentDescription, scope: Scope) -> List[RuleEntry]:
    return [
        entry for entry in RULES
        if entry.scope == scope and not description.suppression.is_ignored(entry.rule.value)
    ]


def _function_label(fn: FunctionDescriptor) -> str:
    return fn.logical_name or fn.qualified_name


def validate(description: DeploymentDescription) -> ValidationReport:
    """
    Run every enabled rule and return all violations in a stable order:
    service rules, then each function (declaration order), then each resource,
    then the build target.
    """
    report = ValidationReport()

    for entry in _enabled(description, Scope.SERVICE):
        report.extend(entry.rule.value, description.service, entry.check(None, description))

    function_rules = _enabled(description, Scope.FUNCTION)
    for fn in description.functions:
        for entry in function_rules:
            report.extend(entry.rule.value, _function_label(fn), entry.check(fn, description))

    resource_rules = _enabled(description, Scope.RESOURCE)
    for resource in description.resources:
        for entry in resource_rules:
            if entry.applies is None or entry.applies(resource):
                report.extend(entry.rule.value, resource.logical_id, entry.check(resource, description))

    build = description.build_target
    if build.bundler_target is not None:
        for entry in _enabled(description, Scope.BUILD):
            report.extend(entry.rule.value, "esbuild", entry.check(build, description))

    logger.debug(
        "Checked service %s (stage %s): %d function(s), %d resource(s), %d violation(s)",
        description.service, description.stage, len(description.functions),
        len(description.resources), len(report.violations),
    )
    return report


def run_convention_check(description: DeploymentDescription, log=None) -> ValidationReport:
    """
    Validate and report through `log` (any object with error/success methods).

    Raises ConventionsError carrying every violation if at least one rule failed.
    """
    report = validate(description)
    if not report.ok:
        if log is not None:
            for message in report.messages:
                log.error(message)
        raise ConventionsError(report.violations)
    if log is not None:
        log.success(SUCCESS_MESSAGE)
    return report

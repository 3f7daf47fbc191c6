# conventions/rules.py
"""
Naming rules.

- Every check is a pure function over plain strings or descriptors and returns
  a list of violation messages (empty when the name is fine).
- Checks never stop at the first problem: each condition appends on its own,
  so one name can produce several messages.
- Nothing here logs or raises; aggregation happens in conventions.validator.
"""

import re
from typing import List, Optional

from config import (
    FORBIDDEN_SERVICE_WORD,
    HANDLER_SUFFIX,
    MAX_SERVICE_NAME_LENGTH,
    STAGE_NAME_LENGTH,
)
from conventions.casing import camel_case, kebab_case, same_identifier
from models import FunctionDescriptor, ResourceDescriptor

_LOWER_ALPHA_RE = re.compile(r"[a-z]*")
_NUMBER_RE = re.compile(r"[0-9]+")

# --- Name derivation helpers ------------------------------------------------

def handler_file_name(handler: str) -> str:
    """Last path segment of a handler reference: "src/a/do-it.handler" -> "do-it.handler"."""
    return handler.split("/")[-1]


def handler_base_name(handler: str) -> str:
    """Handler file name without the ".handler" suffix (unchanged if the suffix is absent)."""
    file_name = handler_file_name(handler)
    if file_name.endswith(HANDLER_SUFFIX):
        return file_name[: -len(HANDLER_SUFFIX)]
    return file_name


def logical_function_name(qualified_name: str, stage: str, service: Optional[str] = None) -> str:
    """
    Recover the short function name from its deployed name.

    - "service-stage-" is stripped when the name starts with it.
    - Otherwise a leading "stage-" is dropped, or everything up to the first "-stage-".
    - If the stage does not appear as a whole dash-separated segment the full
      qualified name is returned, so a manually named function is still checked
      as written ("latest-thing" with stage "tst" stays "latest-thing").
    """
    if service and qualified_name.startswith(f"{service}-{stage}-"):
        return qualified_name[len(f"{service}-{stage}-"):]
    if qualified_name.startswith(f"{stage}-") and len(qualified_name) > len(stage) + 1:
        return qualified_name[len(stage) + 1:]
    _, sep, rest = qualified_name.partition(f"-{stage}-")
    if sep and rest:
        return rest
    return qualified_name


def first_number(text: Optional[str]) -> Optional[str]:
    """First run of decimal digits in `text`, e.g. "nodejs14.x" -> "14"."""
    match = _NUMBER_RE.search(text or "")
    return match.group(0) if match else None

# --- Rules -------------------------------------------------------------------

def check_service_name(name: str) -> List[str]:
    """Service names are kebab case, never contain "service" and fit the length limit."""
    errors: List[str] = []
    if name != kebab_case(name):
        errors.append(f'Service name "{name}" is not kebab case')
    if FORBIDDEN_SERVICE_WORD in name.lower():
        errors.append(f'Service name "{name}" should not include the word "{FORBIDDEN_SERVICE_WORD}"')
    if len(name) > MAX_SERVICE_NAME_LENGTH:
        errors.append(
            f'Service name "{name}" must be less than {MAX_SERVICE_NAME_LENGTH} characters'
        )
    return errors


def check_stage_name(stage: str) -> List[str]:
    errors: List[str] = []
    if not _LOWER_ALPHA_RE.fullmatch(stage):
        errors.append(f'Stage name "{stage}" should only contain alphabet characters in lower case')
    if len(stage) != STAGE_NAME_LENGTH:
        errors.append(f'Stage name "{stage}" must be {STAGE_NAME_LENGTH} characters long')
    return errors


def check_handler_name(fn: FunctionDescriptor) -> List[str]:
    """
    The handler file is kebab case and the reference ends in ".handler".

    A function without a handler is reported rather than skipped.
    """
    if not fn.handler:
        return [f'Function "{fn.logical_name}" has no handler defined']
    errors: List[str] = []
    file_name = handler_file_name(fn.handler)
    base = handler_base_name(fn.handler)
    if base != kebab_case(base):
        errors.append(f'Handler "{fn.handler}" is not kebab case')
    if base == file_name:
        errors.append(f'Handler "{fn.handler}" does not end in "{HANDLER_SUFFIX}"')
    return errors


def check_function_name(fn: FunctionDescriptor, service: str, stage: str) -> List[str]:
    """
    The logical name is camel case and the deployed name was not overridden.

    The deployed name is expected to be "service-stage-logicalName", which is
    what the framework generates when no `name:` is set on the function.
    """
    errors: List[str] = []
    logical = logical_function_name(fn.qualified_name, stage, service)
    if logical and logical != camel_case(logical):
        errors.append(f'Function name "{logical}" is not camel case')
    expected = f"{service}-{stage}-{logical}"
    if fn.qualified_name != expected:
        errors.append(
            f'Function "{fn.qualified_name}" does not follow the default naming format "{expected}"'
        )
    return errors


def check_handler_name_matches_function(fn: FunctionDescriptor, service: str, stage: str) -> List[str]:
    # A missing handler is already reported by check_handler_name
    if not fn.handler:
        return []
    logical = logical_function_name(fn.qualified_name, stage, service)
    base = handler_base_name(fn.handler)
    if same_identifier(logical, base):
        return []
    return [f'Function "{logical}" does not match handler name "{base}{HANDLER_SUFFIX}"']


def check_dynamodb_table_name(resource: ResourceDescriptor, service: str) -> List[str]:
    """
    DynamoDB tables are named "<service>-<kebab-case-name>".

    Reads `tableName` and falls back to CloudFormation's own `TableName`.
    """
    props = resource.properties
    table_name = props.get("tableName") or props.get("TableName")
    if not table_name:
        return [f'DynamoDB table "{resource.logical_id}" has no table name defined']
    if not isinstance(table_name, str):
        # Intrinsic functions (Fn::Join, Fn::Sub ...) are resolved at deploy time
        return [f'DynamoDB table "{resource.logical_id}" has a table name that is not a plain string']

    errors: List[str] = []
    prefix = f"{service}-"
    if not table_name.startswith(prefix):
        errors.append(f'DynamoDB table name "{table_name}" does not start with the service name "{prefix}"')
    if table_name != kebab_case(table_name):
        errors.append(f'DynamoDB table name "{table_name}" is not kebab case')
    return errors


def check_parameter_name(name: str, service: str) -> List[str]:
    prefix = f"{service}-"
    if name.startswith(prefix):
        return []
    return [f'Parameter name "{name}" does not start with the service name "{prefix}"']


def check_runtime_version(runtime: Optional[str], bundler_target: Optional[str]) -> List[str]:
    """
    The provider runtime and the esbuild target agree on the Node major version.

    Nothing to compare (and no violation) when no esbuild target is configured.
    """
    if bundler_target is None:
        return []
    if first_number(runtime) == first_number(bundler_target):
        return []
    return [f'Provider runtime "{runtime}" does not match esbuild node version "{bundler_target}"']

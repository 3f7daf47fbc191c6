# conventions/plugin.py
"""
Host integration.

- ConventionsPlugin wires the validator into a serverless-style host: it
  registers the `custom.conventions` schema, runs before functions are
  compiled for packaging, and exposes an on-demand `conventions` command.
- The host is duck typed. It needs `service` with get_service_name(),
  get_all_functions(), get_function(name), `provider`, `custom` and
  `resources`; DictHost below provides that from a resolved JSON description.
- Logging goes through a leveled sink (error / warning / notice / success).
  Hosts may pass their own via utils={"log": ...}; otherwise the Python
  logging module is used.
"""

import logging
from typing import Any, Dict, List, Optional

from config import CONFIG_KEY, IGNORE_KEY
from conventions.validator import run_convention_check
from models import (
    BuildTarget,
    ConfigurationError,
    DeploymentDescription,
    FunctionDescriptor,
    SuppressionConfig,
    ValidationReport,
    resources_from_dict,
)

logger = logging.getLogger(__name__)

BEFORE_COMPILE_HOOK = "before:package:compileFunctions"
COMMAND_NAME = "conventions"
COMMAND_HOOK = f"{COMMAND_NAME}:check"

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        IGNORE_KEY: {
            "type": "object",
            "properties": {name: {"type": "boolean"} for name in SuppressionConfig.rule_names()},
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


class LoggingSink:
    """Leveled log sink backed by a standard library logger."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self._log = log or logger

    def error(self, message: str) -> None:
        self._log.error(message)

    def warning(self, message: str) -> None:
        self._log.warning(message)

    def notice(self, message: str) -> None:
        self._log.info(message)

    def success(self, message: str) -> None:
        self._log.info(message)


class _DictService:
    def __init__(self, data: Dict[str, Any]):
        service = data.get("service")
        if isinstance(service, dict):
            service = service.get("name")
        self._name = service
        self.provider = dict(data.get("provider") or {})
        self.custom = dict(data.get("custom") or {})
        self.functions = dict(data.get("functions") or {})
        self.resources = dict(data.get("resources") or {})

    def get_service_name(self) -> str:
        return self._name

    def get_all_functions(self) -> List[str]:
        return list(self.functions)

    def get_function(self, name: str) -> Dict[str, Any]:
        return self.functions[name]


class _SchemaHandler:
    def __init__(self):
        self.custom_properties: Dict[str, Any] = {}

    def define_custom_properties(self, schema: Dict[str, Any]) -> None:
        self.custom_properties.update(schema.get("properties", {}))


class DictHost:
    """Minimal host over a resolved description such as `serverless print --format json`."""

    def __init__(self, data: Dict[str, Any]):
        if not isinstance(data, dict):
            raise ConfigurationError("Deployment description must be a mapping")
        self.service = _DictService(data)
        self.resources = self.service.resources
        self.config_schema_handler = _SchemaHandler()


def _get(obj: Any, key: str, default: Any = None) -> Any:
    if isinstance(obj, dict):
        return obj.get(key, default)
    return getattr(obj, key, default)


class ConventionsPlugin:
    """
    Runs the naming convention check for a host.

    Two entry points share one validation pass:
    - run_automatic_preflight(): bound to the host's pre-compile hook
    - run_on_demand(): bound to the `conventions` command
    """

    def __init__(self, serverless, options: Optional[Dict[str, Any]] = None, utils: Optional[Dict[str, Any]] = None):
        self.serverless = serverless
        self.options = options or {}
        self.log = (utils or {}).get("log") or LoggingSink()

        handler = getattr(serverless, "config_schema_handler", None)
        if handler is not None:
            handler.define_custom_properties({"properties": {CONFIG_KEY: CONFIG_SCHEMA}})

        self.commands = {
            COMMAND_NAME: {
                "usage": "Check service, stage, function, handler and table names against the naming conventions",
                "lifecycleEvents": ["check"],
            },
        }
        self.hooks = {
            BEFORE_COMPILE_HOOK: self.run_automatic_preflight,
            COMMAND_HOOK: self.run_on_demand,
        }

    def run_automatic_preflight(self) -> ValidationReport:
        self.log.notice("Starting naming convention check")
        return run_convention_check(self.collect(), self.log)

    def run_on_demand(self) -> ValidationReport:
        return run_convention_check(self.collect(), self.log)

    def collect(self) -> DeploymentDescription:
        """Read everything the rules need from the host into a DeploymentDescription."""
        service = self.serverless.service
        provider = _get(service, "provider") or {}
        stage = self.options.get("stage") or _get(provider, "stage")
        if not stage:
            raise ConfigurationError("No stage given in options or provider configuration")

        functions: List[FunctionDescriptor] = []
        for key in service.get_all_functions():
            definition = service.get_function(key) or {}
            functions.append(FunctionDescriptor(
                logical_name=key,
                qualified_name=_get(definition, "name") or key,
                handler=_get(definition, "handler"),
            ))

        resources_block = _get(self.serverless, "resources") or _get(service, "resources") or {}
        resources = resources_from_dict(_get(resources_block, "Resources") or {})

        custom = _get(service, "custom") or {}
        esbuild = custom.get("esbuild")
        conventions = custom.get(CONFIG_KEY) or {}

        return DeploymentDescription(
            service=service.get_service_name(),
            stage=stage,
            functions=functions,
            resources=resources,
            build_target=BuildTarget(
                runtime=_get(provider, "runtime"),
                bundler_target=esbuild.get("target") if isinstance(esbuild, dict) else None,
            ),
            suppression=SuppressionConfig.from_dict(conventions.get(IGNORE_KEY)),
        )

# tests/test_models.py
"""
Tests for the data models: ignore flag parsing, resource parsing and the aggregate error.
"""

import logging

import pytest

from models import (
    ConfigurationError,
    ConventionsError,
    SuppressionConfig,
    ValidationReport,
    Violation,
    resources_from_dict,
)


def test_suppression_defaults_enable_every_rule():
    config = SuppressionConfig.from_dict(None)
    assert config == SuppressionConfig()
    assert not any(config.is_ignored(name) for name in SuppressionConfig.rule_names())


def test_suppression_from_dict():
    config = SuppressionConfig.from_dict({"serviceName": True, "stageName": False, "handlerName": None})
    assert config.is_ignored("serviceName")
    assert not config.is_ignored("stageName")
    assert not config.is_ignored("handlerName")


def test_suppression_unknown_key_is_warned_and_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        config = SuppressionConfig.from_dict({"tableName": True})
    assert config == SuppressionConfig()
    assert "tableName" in caplog.text


@pytest.mark.parametrize("data", [["serviceName"], "serviceName", {"serviceName": "true"}, {"stageName": 1}])
def test_suppression_rejects_malformed_config(data):
    with pytest.raises(ConfigurationError):
        SuppressionConfig.from_dict(data)


def test_resources_from_dict_keeps_declaration_order():
    resources = resources_from_dict({
        "b": {"Type": "AWS::DynamoDB::Table", "Properties": {"tableName": "x"}},
        "a": {"Type": "AWS::S3::Bucket"},
    })
    assert [r.logical_id for r in resources] == ["b", "a"]
    assert resources[0].properties == {"tableName": "x"}
    assert resources[1].properties == {}


def test_resources_from_dict_rejects_list():
    with pytest.raises(ConfigurationError):
        resources_from_dict([{"Type": "AWS::DynamoDB::Table"}])


def test_conventions_error_joins_messages():
    error = ConventionsError([
        Violation("serviceName", "svc", "first problem"),
        Violation("stageName", "svc", "second problem"),
    ])
    assert str(error) == "Naming convention check failed:\n- first problem\n- second problem"
    assert len(error.violations) == 2


def test_validation_report():
    report = ValidationReport()
    assert report.ok
    report.extend("handlerName", "doThing", ["a", "b"])
    report.extend("functionName", "doThing", [])
    assert not report.ok
    assert report.messages == ["a", "b"]
    assert {v.rule for v in report.violations} == {"handlerName"}

"""Import checks for rulekit.validation."""

import importlib


def test_validation_package_imports():
    module = importlib.import_module("rulekit.validation")
    assert module.validate is not None
    assert module.StructuralValidator is not None


def test_templates_loaded_from_pydantic():
    from rulekit.validation.types import _TEMPLATES

    assert _TEMPLATES["greater_than"] == "Input should be greater than {gt}"
    assert _TEMPLATES["string_type"] == "Input should be a valid string"

"""Gherkin parsing and feature discovery."""

from featuregate.gherkin.models import (
    Background,
    DocString,
    Examples,
    Feature,
    Rule,
    Scenario,
    Step,
)
from featuregate.gherkin.parser import parse_feature
from featuregate.gherkin.scanner import FeatureScanner, is_feature

__all__ = [
    "Background",
    "DocString",
    "Examples",
    "Feature",
    "FeatureScanner",
    "Rule",
    "Scenario",
    "Step",
    "is_feature",
    "parse_feature",
]

"""FeatureGate - interactive Gherkin feature supply for test runners."""

__version__ = "0.1.0"

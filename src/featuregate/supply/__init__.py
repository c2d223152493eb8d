"""Feature suppliers: interactive submissions and fixed locations."""

from featuregate.supply.builder import FeatureBuilder, logical_filename
from featuregate.supply.files import FileFeatureSupplier, load_features
from featuregate.supply.gate import GateState, UserInputFeatureSupplier
from featuregate.supply.normalizer import PullStamp, normalize_text
from featuregate.supply.protocols import FeatureSupplier, SubmissionListener
from featuregate.supply.publisher import ScratchPublisher
from featuregate.supply.runtime import run_supplier
from featuregate.supply.terminal import TerminalInputSurface

__all__ = [
    "FeatureBuilder",
    "FeatureSupplier",
    "FileFeatureSupplier",
    "GateState",
    "PullStamp",
    "ScratchPublisher",
    "SubmissionListener",
    "TerminalInputSurface",
    "UserInputFeatureSupplier",
    "load_features",
    "logical_filename",
    "normalize_text",
    "run_supplier",
]

"""weighted-reservoir: one-pass weighted random sampling without replacement.

The library is silent by default. Enable logging with one of the helpers
re-exported here, e.g. ``weightedreservoir.enable_console_logging("DEBUG")``.
"""

import logging

from weightedreservoir.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from weightedreservoir.sampling import (
    InvalidWeightError,
    NumpyRandomSource,
    RandomSource,
    SingleItemReservoir,
    StdlibRandomSource,
    WeightErrorKind,
    WeightedReservoir,
    as_random_source,
    check_weight,
    is_valid_weight,
    sample_one,
    sample_weighted,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidWeightError",
    "NumpyRandomSource",
    "RandomSource",
    "SingleItemReservoir",
    "StdlibRandomSource",
    "WeightErrorKind",
    "WeightedReservoir",
    "__version__",
    "as_random_source",
    "check_weight",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "is_valid_weight",
    "sample_one",
    "sample_weighted",
    "set_level",
    "set_module_level",
]

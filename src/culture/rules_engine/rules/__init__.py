from .cargo_metadata_readable import CARGO_METADATA_READABLE
from .has_contributing_file import HAS_CONTRIBUTING_FILE
from .has_license_file import HAS_LICENSE_FILE
from .has_readme_file import HAS_README_FILE
from .has_continuous_integration_file import HAS_CONTINUOUS_INTEGRATION_FILE
from .builds_cleanly_without_warnings_or_errors import (
    BUILDS_CLEANLY_WITHOUT_WARNINGS_OR_ERRORS,
)
from .passes_multiple_tests import PASSES_MULTIPLE_TESTS
from .uses_property_based_test_library import USES_PROPERTY_BASED_TEST_LIBRARY
from .has_rustfmt_file import HAS_RUSTFMT_FILE
from .under_source_control import UNDER_SOURCE_CONTROL

__all__ = [
    "CARGO_METADATA_READABLE",
    "HAS_CONTRIBUTING_FILE",
    "HAS_LICENSE_FILE",
    "HAS_README_FILE",
    "HAS_CONTINUOUS_INTEGRATION_FILE",
    "BUILDS_CLEANLY_WITHOUT_WARNINGS_OR_ERRORS",
    "PASSES_MULTIPLE_TESTS",
    "USES_PROPERTY_BASED_TEST_LIBRARY",
    "HAS_RUSTFMT_FILE",
    "UNDER_SOURCE_CONTROL",
]

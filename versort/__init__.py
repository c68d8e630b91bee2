from __future__ import annotations

__version__ = "0.1.0"

from versort.compare import compare_versions, version_key  # noqa: E402
from versort.config import load_config  # noqa: E402
from versort.engine import (  # noqa: E402
    SortResult,
    UnparsableLineError,
    apply_policy,
    sort_lines,
    sort_parsed,
    sort_versions,
)
from versort.parser import parse_lines, parse_version  # noqa: E402
from versort.schemas import (  # noqa: E402
    FailureReason,
    Identifier,
    ParseOutcome,
    Parsed,
    SortConfig,
    Unparsed,
    Version,
)

__all__ = [
    "__version__",
    # Parser
    "parse_version",
    "parse_lines",
    # Comparator
    "compare_versions",
    "version_key",
    # Engine
    "sort_lines",
    "sort_versions",
    "sort_parsed",
    "apply_policy",
    "SortResult",
    "UnparsableLineError",
    # Config
    "load_config",
    "SortConfig",
    # Schemas
    "Version",
    "Identifier",
    "Parsed",
    "Unparsed",
    "ParseOutcome",
    "FailureReason",
]

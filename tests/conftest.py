"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed jcskit package.
"""

import os
import pytest
from pathlib import Path


def pytest_addoption(parser):
    """Add gated perf and corpus test options."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )
    parser.addoption(
        "--run-es6-corpus",
        action="store_true",
        default=False,
        help="Run the ES6 numeric oracle corpus (gated; set JCSKIT_ES6_CORPUS)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip gated tests unless their option is set."""
    gates = {
        "perf": ("--run-perf", "perf tests gated; pass --run-perf"),
        "corpus": ("--run-es6-corpus", "corpus tests gated; pass --run-es6-corpus"),
    }
    for keyword, (option, reason) in gates.items():
        if config.getoption(option):
            continue
        skip = pytest.mark.skip(reason=reason)
        for item in items:
            if keyword in item.keywords:
                item.add_marker(skip)


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "fixtures"


def pytest_sessionfinish(session, exitstatus):
    """Best-effort cleanup for basetemp on Windows without patching pytest internals."""
    if os.name != "nt":
        return
    basetemp = getattr(session.config.option, "basetemp", None)
    if not basetemp:
        return
    basetemp_path = Path(basetemp)
    if not basetemp_path.exists():
        return
    try:
        import shutil
        shutil.rmtree(basetemp_path)
    except (PermissionError, OSError):
        # If cleanup fails, let it surface as a warning rather than masking errors.
        import warnings
        warnings.warn(f"Could not remove basetemp: {basetemp_path}")

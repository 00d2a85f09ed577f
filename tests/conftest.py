"""
Pytest fixtures for the normalizer tests.

Test layout:
- unit/test_domain: tags, errors
- unit/test_core: classifier, cells, expansion, conversion, config
"""

from pathlib import Path

import pyarrow as pa
import pytest
import yaml

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Project root."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """Packaged default.yaml path."""
    return project_root / "slt_results" / "default.yaml"


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a YAML config file and return its path."""

    def _write(data: object, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True)
        return path

    return _write


# =============================================================================
# Arrow Fixtures
# =============================================================================

@pytest.fixture
def explain_schema() -> pa.Schema:
    """Two text columns, like EXPLAIN output."""
    return pa.schema([
        pa.field("plan_type", pa.string()),
        pa.field("plan", pa.string()),
    ])


@pytest.fixture
def explain_batch(explain_schema: pa.Schema) -> pa.RecordBatch:
    """EXPLAIN batch with a multi-line plan cell."""
    return pa.RecordBatch.from_pydict(
        {
            "plan_type": ["logical_plan"],
            "plan": ["Sort: d.b ASC NULLS LAST\n  Projection: d.b, MAX(d.a) AS max_a"],
        },
        schema=explain_schema,
    )


@pytest.fixture
def mixed_schema() -> pa.Schema:
    """One column per common category."""
    return pa.schema([
        pa.field("id", pa.int64()),
        pa.field("flag", pa.bool_()),
        pa.field("ratio", pa.float64()),
        pa.field("price", pa.decimal128(10, 2)),
        pa.field("name", pa.string()),
    ])

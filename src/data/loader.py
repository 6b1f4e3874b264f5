"""Loading and validation of the bundled rights content tables.

Each :class:`~src.models.enums.RightsDomain` has one JSON file under
``src/data/rights/`` holding its category records and directory data.
Tables are read once at application startup, validated into immutable
:class:`~src.models.rights.CategoryTable` models and never touched again.

Validation is eager: a table whose default category is missing, whose
keys drift from the domain's category enum, or whose baseline timelines
do not parse stops the application from starting.
"""

from __future__ import annotations

from pathlib import Path

import orjson
import structlog
from pydantic import ValidationError

from src.models.enums import DOMAIN_CATEGORIES, RightsDomain
from src.models.rights import CategoryTable
from src.services.timeline import TimelineParseError, parse_timeline

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

_DATA_DIR: Path = Path(__file__).resolve().parent / "rights"


class CategoryTableError(ValueError):
    """A content table failed validation."""

    def __init__(self, domain: str, message: str) -> None:
        self.domain = domain
        super().__init__(f"{domain}: {message}")


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


def table_path(domain: RightsDomain, data_dir: Path | None = None) -> Path:
    return (data_dir or _DATA_DIR) / f"{domain.value}.json"


def load_category_table(domain: RightsDomain, path: Path | None = None) -> CategoryTable:
    """Load and validate the content table for *domain*.

    Parameters
    ----------
    domain:
        The domain the file is expected to describe.
    path:
        Path to the JSON file.  Defaults to the bundled table.

    Raises
    ------
    FileNotFoundError
        If the JSON file does not exist.
    orjson.JSONDecodeError
        If the JSON is malformed.
    CategoryTableError
        If the table does not validate.
    """
    file_path = path or table_path(domain)

    if not file_path.exists():
        raise FileNotFoundError(f"Rights table not found: {file_path}")

    raw = orjson.loads(file_path.read_bytes())

    if not isinstance(raw, dict):
        raise CategoryTableError(domain, f"top level must be a JSON object, got {type(raw).__name__}")

    if raw.get("domain") != domain.value:
        raise CategoryTableError(domain, f"file declares domain {raw.get('domain')!r}")

    try:
        table = CategoryTable.model_validate(raw)
    except ValidationError as exc:
        raise CategoryTableError(domain, str(exc)) from exc

    validate_table(table)

    logger.info(
        "loader.table_loaded",
        domain=domain.value,
        categories=len(table.categories),
        default=table.default_category,
        source=str(file_path),
    )
    return table


def validate_table(table: CategoryTable) -> None:
    """Check a table's keys and baseline timelines.

    The category keys must be exactly the members of the domain's
    category enum, and every baseline timeline must parse.
    """
    enum_cls = DOMAIN_CATEGORIES[table.domain]
    expected = {member.value for member in enum_cls}
    actual = set(table.categories)

    missing = sorted(expected - actual)
    unexpected = sorted(actual - expected)
    if missing or unexpected:
        raise CategoryTableError(
            table.domain,
            f"category keys do not match {enum_cls.__name__} (missing={missing}, unexpected={unexpected})",
        )

    for key, record in table.categories.items():
        try:
            parse_timeline(record.timeline)
        except TimelineParseError as exc:
            raise CategoryTableError(table.domain, f"category '{key}': {exc}") from exc


def load_all_tables(data_dir: Path | None = None) -> dict[RightsDomain, CategoryTable]:
    """Load every domain's table from *data_dir* (default: bundled data)."""
    tables: dict[RightsDomain, CategoryTable] = {}
    for domain in RightsDomain:
        tables[domain] = load_category_table(domain, table_path(domain, data_dir))

    logger.info("loader.all_tables_loaded", domains=len(tables))
    return tables

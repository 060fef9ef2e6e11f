"""
Контракты событий и снапшотов ledger (JSON Schema, Draft 2020-12)

Схемы поставляются внутри пакета (schema/*.json) и загружаются один раз
при импорте: каждый контракт — один скомпилированный валидатор, который
переиспользуется на каждом emit при LedgerConfig.validate_event_contracts.

Контракты:
- TRANSFER_EVENT_CONTRACT  — payload TransferEvent ("from"/"to" как hex или null)
- APPROVAL_EVENT_CONTRACT  — payload ApprovalEvent
- LEDGER_SNAPSHOT_CONTRACT — payload LedgerSnapshot
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и meta-валидация файлов схем с кэшем по имени."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: файла нет
            ValueError: файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# CONTRACT
# =============================================================================


class ContractValidator:
    """Скомпилированный валидатор одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or SchemaLoader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises ValidationError на первом нарушении."""
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


_LOADER = SchemaLoader()

TRANSFER_EVENT_CONTRACT = ContractValidator("transfer_event", _LOADER)
APPROVAL_EVENT_CONTRACT = ContractValidator("approval_event", _LOADER)
LEDGER_SNAPSHOT_CONTRACT = ContractValidator("ledger_snapshot", _LOADER)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_transfer_event(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если payload не соответствует transfer_event."""
    TRANSFER_EVENT_CONTRACT.validate(data)


def validate_approval_event(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если payload не соответствует approval_event."""
    APPROVAL_EVENT_CONTRACT.validate(data)


def validate_ledger_snapshot(data: Dict[str, Any]) -> None:
    """Raises ValidationError, если payload не соответствует ledger_snapshot."""
    LEDGER_SNAPSHOT_CONTRACT.validate(data)

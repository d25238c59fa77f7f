"""
JSON Schema Contract Validators

Валидация входных данных генератора документации против JSON Schema.
Схемы поставляются вместе с пакетом (tiempo/contracts/schema/).

Схемы:
- docs_meta.json — meta.json категории документации
- doc_frontmatter.json — frontmatter страницы документации (.mdx)
"""

import json
from pathlib import Path
from typing import Any, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы читаются из каталога schema_dir и кэшируются по имени.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir

        # Кэш загруженных схем
        self._schemas: dict[str, dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'docs_meta')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Общий экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        """
        Args:
            schema_name: Имя схемы для валидации
            loader: Источник схем (по умолчанию — схемы пакета)
        """
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def iter_errors(self, data: dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class DocsMetaValidator(ContractValidator):
    """Валидатор meta.json категории: title, description, icon, pages."""

    def __init__(self):
        super().__init__("docs_meta")


class DocFrontmatterValidator(ContractValidator):
    """Валидатор frontmatter страницы: title, description."""

    def __init__(self):
        super().__init__("doc_frontmatter")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_docs_meta(data: dict[str, Any]) -> None:
    """
    Валидация meta.json категории.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DocsMetaValidator().validate(data)


def validate_doc_frontmatter(data: dict[str, Any]) -> None:
    """
    Валидация frontmatter страницы.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DocFrontmatterValidator().validate(data)

"""
Documentation Generator

Единственный источник правды — страницы .mdx в каталоге документации:

    <docs_dir>/<category>/meta.json      {title, description?, icon?, pages[]}
    <docs_dir>/<category>/<slug>.mdx     frontmatter (title, description) + тело

Генерирует:
1. Справочные markdown файлы навыка (<skill_refs_dir>/<category>/<slug>.md)
2. llms.txt — индекс для LLM (редкие функции — в разделе "Optional")
3. SKILL.md — таблицы функций по категориям

meta.json и frontmatter проверяются JSON Schema контрактами
(tiempo.contracts). Страница, указанная в meta.json, но отсутствующая
на диске, пропускается с предупреждением в лог.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from tiempo.contracts import ContractValidator, DocFrontmatterValidator, DocsMetaValidator

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

BASE_URL: Final[str] = "https://eng.gobrand.app/tiempo/docs"

# Категории в порядке вывода в llms.txt и SKILL.md
CATEGORIES: Final[tuple[str, ...]] = (
    "conversion",
    "current-time",
    "formatting",
    "arithmetic",
    "boundaries",
    "comparison",
    "difference",
    "utilities",
)

CATEGORY_TITLES: Final[dict[str, str]] = {
    "conversion": "Conversion",
    "current-time": "Current Time",
    "formatting": "Formatting",
    "arithmetic": "Arithmetic",
    "boundaries": "Boundaries",
    "comparison": "Comparison",
    "difference": "Difference",
    "utilities": "Utilities",
}

# Функции, которые в llms.txt выносятся в раздел "Optional"
OPTIONAL_FUNCTIONS: Final[frozenset[str]] = frozenset(
    {
        "add-milliseconds",
        "add-microseconds",
        "add-nanoseconds",
        "sub-milliseconds",
        "sub-microseconds",
        "sub-nanoseconds",
        "difference-in-milliseconds",
        "difference-in-microseconds",
        "difference-in-nanoseconds",
        "is-same-hour",
        "is-same-minute",
        "is-same-second",
        "is-same-millisecond",
        "is-same-microsecond",
        "is-same-nanosecond",
        "is-plain-date-before",
        "is-plain-date-after",
        "is-plain-date-equal",
        "is-plain-time-before",
        "is-plain-time-after",
        "is-plain-time-equal",
    }
)

_FRONTMATTER_RE = re.compile(r"^---\n(.*?)\n---\n(.*)$", re.DOTALL)

_LLMS_HEADER: Final[tuple[str, ...]] = (
    "# tiempo",
    "",
    "> A lightweight datetime utility library for timezone conversions, formatting, and date math.",
    "",
    "tiempo provides a familiar date-fns-style API with nanosecond precision, "
    "DST-safe arithmetic and immutable values across 400+ IANA timezones.",
    "",
    "## Docs",
    "",
    f"- [Introduction]({BASE_URL}): Overview of tiempo and key features",
    f"- [Installation]({BASE_URL}/installation): Getting started with tiempo in your project",
    "",
)

_SKILL_HEADER: Final[tuple[str, ...]] = (
    "---",
    "name: tiempo",
    "description: Use when working with dates, times, timezones, or datetime conversions "
    "in Python. Provides guidance on using the tiempo library for timezone-safe datetime handling.",
    "---",
    "",
    "# tiempo - Timezone-Safe Datetime Handling",
    "",
    "Lightweight utility library for timezone conversions, formatting and date math.",
    "",
    "```bash",
    "pip install tiempo",
    "```",
    "",
    "## Best Practices",
    "",
    "- **Always use explicit timezones** - Never rely on implicit timezone behavior.",
    "- **Avoid naive datetime** - Use Instant / ZonedDateTime for timezone work.",
    "- **Store UTC, display local** - Backend stores UTC, frontend converts for display.",
    "",
    "---",
    "",
)


# =============================================================================
# CONFIG & RESULT
# =============================================================================


@dataclass(frozen=True)
class DocsConfig:
    """Пути и параметры генератора (по умолчанию — раскладка репозитория сайта)."""

    docs_dir: Path = Path("www/content/docs")
    skill_refs_dir: Path = Path("skills/tiempo/references")
    llms_txt_path: Path = Path("www/public/llms.txt")
    skill_md_path: Path = Path("skills/tiempo/SKILL.md")
    base_url: str = BASE_URL
    categories: tuple[str, ...] = CATEGORIES
    optional_functions: frozenset[str] = OPTIONAL_FUNCTIONS


@dataclass(frozen=True)
class DocPage:
    """Одна страница документации."""

    slug: str
    category: str
    title: str
    description: str
    body: str
    file_path: Path


@dataclass
class GenerationResult:
    """Что было записано и что пропущено."""

    pages: list[DocPage] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    missing: list[Path] = field(default_factory=list)


# =============================================================================
# PARSING
# =============================================================================


def parse_mdx(content: str) -> tuple[dict[str, str], str]:
    """
    Разобрать frontmatter и тело страницы.

    Frontmatter — строки "key: value" между двумя "---". Без frontmatter
    весь текст считается телом.

    Examples:
        >>> parse_mdx("---\\ntitle: addDays\\n---\\nBody\\n")
        ({'title': 'addDays'}, 'Body\\n')
    """
    match = _FRONTMATTER_RE.match(content)
    if match is None:
        return {}, content

    frontmatter: dict[str, str] = {}
    for line in match.group(1).split("\n"):
        key, sep, value = line.partition(":")
        if sep and key.strip():
            frontmatter[key.strip()] = value.strip()

    return frontmatter, match.group(2)


# =============================================================================
# GENERATOR
# =============================================================================


class DocsGenerator:
    """
    Генератор справочных файлов, llms.txt и SKILL.md из страниц .mdx.

    Порядок:
    1. load_pages — meta.json каждой категории, затем страницы в порядке pages[]
    2. write_skill_refs — по одному .md на страницу
    3. write_llms_txt
    4. write_skill_md
    """

    def __init__(self, config: DocsConfig | None = None):
        self.config = config or DocsConfig()
        self._meta_validator = DocsMetaValidator()
        self._frontmatter_validator = DocFrontmatterValidator()

    def _check(self, validator: ContractValidator, data: dict, source: Path) -> None:
        """
        Проверить data по контракту; все нарушения пишутся в лог.

        Raises:
            jsonschema.ValidationError: Первое найденное нарушение
        """
        errors = list(validator.iter_errors(data))
        for error in errors:
            location = "/".join(str(part) for part in error.path) or "<root>"
            logger.warning("%s: %s: %s", source, location, error.message)
        if errors:
            raise errors[0]

    def load_pages(self, result: GenerationResult | None = None) -> list[DocPage]:
        """
        Прочитать страницы всех категорий.

        Raises:
            jsonschema.ValidationError: Если meta.json или frontmatter не
                соответствуют контракту
        """
        pages: list[DocPage] = []

        for category in self.config.categories:
            category_dir = self.config.docs_dir / category
            meta_path = category_dir / "meta.json"
            if not meta_path.exists():
                logger.debug("Skipping category %s: no meta.json", category)
                continue

            meta = json.loads(meta_path.read_text(encoding="utf-8"))
            self._check(self._meta_validator, meta, meta_path)

            for slug in meta["pages"]:
                file_path = category_dir / f"{slug}.mdx"
                if not file_path.exists():
                    logger.warning("%s not found (listed in meta.json)", file_path)
                    if result is not None:
                        result.missing.append(file_path)
                    continue

                frontmatter, body = parse_mdx(file_path.read_text(encoding="utf-8"))
                if frontmatter:
                    self._check(self._frontmatter_validator, frontmatter, file_path)

                pages.append(
                    DocPage(
                        slug=slug,
                        category=category,
                        title=frontmatter.get("title") or slug,
                        description=frontmatter.get("description", ""),
                        body=body,
                        file_path=file_path,
                    )
                )

        return pages

    def _write(self, path: Path, content: str, result: GenerationResult) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        result.written.append(path)
        logger.info("Wrote %s", path)

    def _by_category(self, pages: list[DocPage]) -> dict[str, list[DocPage]]:
        grouped: dict[str, list[DocPage]] = {}
        for page in pages:
            grouped.setdefault(page.category, []).append(page)
        return grouped

    def _link(self, page: DocPage) -> str:
        url = f"{self.config.base_url}/{page.category}/{page.slug}"
        return f"- [{page.title}]({url}): {page.description}"

    def write_skill_refs(self, pages: list[DocPage], result: GenerationResult) -> None:
        """Справочный файл на каждую страницу: "# title" + тело."""
        for page in pages:
            out_path = self.config.skill_refs_dir / page.category / f"{page.slug}.md"
            self._write(out_path, f"# {page.title}\n{page.body}", result)

    def render_llms_txt(self, pages: list[DocPage]) -> str:
        """Текст llms.txt: разделы по категориям, затем "Optional"."""
        lines = list(_LLMS_HEADER)

        required = [p for p in pages if p.slug not in self.config.optional_functions]
        optional = [p for p in pages if p.slug in self.config.optional_functions]
        grouped = self._by_category(required)

        for category in self.config.categories:
            category_pages = grouped.get(category)
            if not category_pages:
                continue
            lines.append(f"## {CATEGORY_TITLES.get(category, category)}")
            lines.append("")
            lines.extend(self._link(page) for page in category_pages)
            lines.append("")

        if optional:
            lines.append("## Optional")
            lines.append("")
            lines.extend(self._link(page) for page in optional)
            lines.append("")

        return "\n".join(lines)

    def render_skill_md(self, pages: list[DocPage]) -> str:
        """Текст SKILL.md: таблица функций на каждую категорию."""
        lines = list(_SKILL_HEADER)
        grouped = self._by_category(pages)

        for category in self.config.categories:
            category_pages = grouped.get(category)
            if not category_pages:
                continue
            lines.append(f"## {CATEGORY_TITLES.get(category, category)}")
            lines.append("")
            lines.append("| Function | Description | Reference |")
            lines.append("|----------|-------------|-----------|")
            for page in category_pages:
                ref_path = f"references/{category}/{page.slug}.md"
                lines.append(
                    f"| `{page.title}()` | {page.description} | [details]({ref_path}) |"
                )
            lines.append("")

        return "\n".join(lines)

    def generate(self) -> GenerationResult:
        """Полный цикл генерации."""
        result = GenerationResult()
        result.pages = self.load_pages(result)
        logger.info("Found %d doc files in %s", len(result.pages), self.config.docs_dir)

        self.write_skill_refs(result.pages, result)
        self._write(self.config.llms_txt_path, self.render_llms_txt(result.pages), result)
        self._write(self.config.skill_md_path, self.render_skill_md(result.pages), result)

        return result

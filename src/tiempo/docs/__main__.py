"""
CLI генератора документации.

    python -m tiempo.docs [--docs-dir DIR] [--skill-refs-dir DIR]
                          [--llms-txt PATH] [--skill-md PATH] [--base-url URL]
"""

import argparse
import logging
from pathlib import Path

from tiempo.docs.generator import DocsConfig, DocsGenerator


def build_parser() -> argparse.ArgumentParser:
    defaults = DocsConfig()
    parser = argparse.ArgumentParser(
        prog="tiempo-docs",
        description="Generate skill references, llms.txt and SKILL.md from MDX docs",
    )
    parser.add_argument("--docs-dir", type=Path, default=defaults.docs_dir, help="MDX docs root")
    parser.add_argument(
        "--skill-refs-dir", type=Path, default=defaults.skill_refs_dir, help="Output dir for references"
    )
    parser.add_argument("--llms-txt", type=Path, default=defaults.llms_txt_path, help="llms.txt path")
    parser.add_argument("--skill-md", type=Path, default=defaults.skill_md_path, help="SKILL.md path")
    parser.add_argument("--base-url", default=defaults.base_url, help="Docs site base URL")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = DocsConfig(
        docs_dir=args.docs_dir,
        skill_refs_dir=args.skill_refs_dir,
        llms_txt_path=args.llms_txt,
        skill_md_path=args.skill_md,
        base_url=args.base_url,
    )
    result = DocsGenerator(config).generate()

    logging.getLogger(__name__).info(
        "Done: %d pages, %d files written, %d missing",
        len(result.pages),
        len(result.written),
        len(result.missing),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""
Documentation generator: MDX pages -> skill references, llms.txt, SKILL.md.
"""

from .generator import DocPage, DocsConfig, DocsGenerator, GenerationResult, parse_mdx

__all__ = [
    "DocPage",
    "DocsConfig",
    "DocsGenerator",
    "GenerationResult",
    "parse_mdx",
]

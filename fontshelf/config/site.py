"""
Site presentation settings used by the page templates.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SiteConfig:
    """Values substituted into the generated HTML pages."""

    title: str = "Online Fonts"
    base_url: str = "https://fonts.lzray.com"  # public host used in copyable snippets
    language: str = "zh-CN"
    sample_text: str = (
        "一蓑烟雨任平生 – The quick brown fox jumps over the lazy dog. 1234567890"
    )
    repository_url: str = "https://github.com/"

    @property
    def public_root(self) -> str:
        """Base URL without a trailing slash."""
        return self.base_url.rstrip("/")


DEFAULT_SITE = SiteConfig()

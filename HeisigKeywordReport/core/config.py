"""Configuration schema.

Plain dataclasses with the defaults the report has always been built with.
There is no config file and no environment lookup; the entry point overrides
individual fields from its command-line flags.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from .models import EDITIONS


@dataclass
class ScrapeConfig:
    base_url: str = "https://jpdb.io/kanji/"
    delay_seconds: float = 1.0  # the server blocks us if we go faster
    timeout_seconds: float = 30.0
    user_agent: str = "Mozilla/5.0 (compatible; heisig-keyword-report)"


@dataclass
class PathsConfig:
    reference_csv: str = "vendor/heisig-kanjis/heisig-kanjis.csv"
    cache_dir: str = ".cache"
    output_dir: str = "docs"


@dataclass
class ReportConfig:
    editions: Tuple[str, ...] = EDITIONS
    lookup_url: str = "https://kanji.koohii.com/study/kanji/"
    basename_template: str = "kanji-keywords-{edition}th-edition"

    def basename(self, edition: str) -> str:
        return self.basename_template.format(edition=edition)


@dataclass
class AppConfig:
    scrape: ScrapeConfig = field(default_factory=ScrapeConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    report: ReportConfig = field(default_factory=ReportConfig)

"""Build a stylesheet for the classes used in content files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Set

from .config import BuildConfig
from .host import Stylesheet
from .plugin import fluid_core_plugins

logger = logging.getLogger("fluid_tailwind")

EXCLUDE_PARTS = {"node_modules", ".git"}
VALID_CLASS = re.compile(r"^[A-Za-z0-9_:\-/\[\]\(\)\.,%~@#]+$")
CLASS_ATTR_RE = re.compile(r"""class(?:Name)?=(?:"([^"]+)"|'([^']+)')""")


def extract_candidates(text: str) -> Set[str]:
    classes: Set[str] = set()
    for match in CLASS_ATTR_RE.finditer(text):
        value = match.group(1) or match.group(2)
        for token in re.split(r"\s+", value.strip()):
            if token and VALID_CLASS.match(token):
                classes.add(token)
    return classes


def iter_content_files(base_dir: Path, globs: Iterable[str]) -> Iterable[Path]:
    seen: Set[Path] = set()
    for glob_pattern in globs:
        for path in sorted(base_dir.glob(glob_pattern)):
            if path in seen or not path.is_file():
                continue
            if any(part in EXCLUDE_PARTS for part in path.parts):
                continue
            seen.add(path)
            yield path


def parse_class_tokens(base_dir: Path, globs: Iterable[str]) -> List[str]:
    classes: Set[str] = set()
    for path in iter_content_files(base_dir, globs):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            logger.warning("Skipping %s: %s", path, err)
            continue
        classes.update(extract_candidates(text))
    return sorted(classes)


@dataclass
class BuildResult:
    output: Path
    rule_count: int
    candidate_count: int


def create_stylesheet(config: BuildConfig) -> Stylesheet:
    return Stylesheet(config.theme, plugins=[fluid_core_plugins], core_plugins=config.core_plugins)


def build_css(config: BuildConfig) -> BuildResult:
    candidates = parse_class_tokens(config.base_dir, config.content)
    css_rules = create_stylesheet(config).build(candidates)
    output = config.output if config.output.is_absolute() else config.base_dir / config.output
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text("\n".join(css_rules) + "\n", encoding="utf-8")
    logger.info("Generated %d CSS rules from %d classes -> %s", len(css_rules), len(candidates), output)
    return BuildResult(output=output, rule_count=len(css_rules), candidate_count=len(candidates))

# prompt_template.py
"""
Prompt templates stored as plain-text files next to this module.

Markers are written ``{{name}}``. A template is checked when it is loaded:
the markers it contains must be exactly the ones the caller expects, each
appearing once. Rendering is literal substitution in a single pass, so text
coming from the user is never re-scanned for markers.

NOTE: user text (OCR output, ingredient names) is embedded as-is. Nothing
here protects against prompt injection.
"""

import os
import re
from collections import Counter
from typing import Iterable, Mapping

from ..exceptions import TemplateMarkerError, TemplateNotFoundError

MARKER_RE = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")

SCANNER_TEMPLATE = "scanner.txt"
INCLUDE_EXCLUDE_TEMPLATE = "include_exclude.txt"
INCLUDE_EXCLUDE_MARKERS = frozenset({"medical_report", "ingredients", "health_data"})


class PromptTemplate:
    """An immutable template whose marker set has been validated."""

    def __init__(self, text: str, expected_markers: Iterable[str] = (), name: str = "<string>"):
        self.name = name
        self.text = text
        self.markers = frozenset(expected_markers)
        self._validate()

    @classmethod
    def load(cls, name: str, expected_markers: Iterable[str], prompts_dir: str) -> "PromptTemplate":
        path = os.path.join(prompts_dir, name)
        if not os.path.isfile(path):
            raise TemplateNotFoundError(path)
        with open(path, "r", encoding="utf-8") as f:
            text = f.read().strip()
        return cls(text, expected_markers, name=name)

    def _validate(self) -> None:
        found = Counter(m.group(1) for m in MARKER_RE.finditer(self.text))
        duplicated = sorted(k for k, n in found.items() if n > 1)
        missing = sorted(self.markers - set(found))
        unexpected = sorted(set(found) - self.markers)
        problems = []
        if missing:
            problems.append(f"missing {missing}")
        if duplicated:
            problems.append(f"duplicated {duplicated}")
        if unexpected:
            problems.append(f"unexpected {unexpected}")
        if problems:
            raise TemplateMarkerError(f"template {self.name}: " + ", ".join(problems))

    def render(self, values: Mapping[str, str]) -> str:
        """Substitute every marker with its value; all markers must be given."""
        missing = sorted(self.markers - set(values))
        if missing:
            raise TemplateMarkerError(f"template {self.name}: no value for {missing}")
        return MARKER_RE.sub(lambda m: str(values[m.group(1)]), self.text)

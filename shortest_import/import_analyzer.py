"""Composition of alias resolution and the shortness decision."""

import logging
import posixpath
from pathlib import Path

from shortest_import.alias_table import AliasTable
from shortest_import.analyzer_settings import AnalyzerSettings
from shortest_import.candidate_form import CandidateForm, SpecifierKind
from shortest_import.decide import decide
from shortest_import.find_shortest_alias import find_shortest_alias
from shortest_import.resolve_alias_specifier import (
    FileExists,
    resolve_alias_specifier,
)
from shortest_import.to_relative_specifier import to_relative_specifier
from shortest_import.verdict import Verdict

logger = logging.getLogger(__name__)


def _is_file(path: str) -> bool:
    return Path(path).is_file()


class ImportAnalyzer:
    """Decides whether an import specifier has a shorter equivalent form.

    Holds only the read-only alias table and settings, so one instance may
    be shared across files and threads.
    """

    def __init__(
        self,
        table: AliasTable | None,
        settings: AnalyzerSettings | None = None,
        file_exists: FileExists | None = None,
    ) -> None:
        """Initialize the analyzer with an alias table and settings."""
        self.table = table or AliasTable()
        self.settings = settings or AnalyzerSettings()
        if file_exists is None and self.settings.check_exists:
            file_exists = _is_file
        self.file_exists = file_exists

    def alternative_for(self, file_dir: str, specifier: str) -> CandidateForm | None:
        """Return the best equivalent specifier of the opposite kind, if any."""
        if not self.table:
            return None

        file_dir = Path(file_dir).as_posix()
        original = CandidateForm.of(specifier)
        extensions = self.settings.extensions
        index_name = self.settings.index_name

        if original.kind is SpecifierKind.RELATIVE:
            absolute_path = posixpath.normpath(posixpath.join(file_dir, specifier))
            alias_import = find_shortest_alias(
                absolute_path, self.table, extensions, index_name
            )
            if alias_import is None:
                return None
            return CandidateForm(alias_import, SpecifierKind.ALIASED)

        resolved = resolve_alias_specifier(
            specifier, self.table, extensions, index_name, self.file_exists
        )
        if resolved is None:
            return None
        relative_import = to_relative_specifier(
            file_dir, resolved, extensions, index_name
        )
        return CandidateForm(relative_import, SpecifierKind.RELATIVE)

    def analyze(self, file_dir: str, specifier: object) -> Verdict:
        """Analyze one specifier occurrence; anything unclassifiable is kept."""
        if not isinstance(specifier, str) or not specifier:
            return Verdict.keep()

        original = CandidateForm.of(specifier)
        alternative = self.alternative_for(file_dir, specifier)
        verdict = decide(original, alternative, self.settings.tie_break)
        if verdict.alternative is not None:
            logger.debug(
                "%s: %s (%d) -> %s (%d)",
                file_dir,
                specifier,
                original.segment_count,
                verdict.alternative.specifier_text,
                verdict.alternative.segment_count,
            )
        return verdict

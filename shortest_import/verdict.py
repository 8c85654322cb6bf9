"""Outcome of analyzing a single import specifier."""

from dataclasses import dataclass

from shortest_import.candidate_form import CandidateForm


@dataclass(frozen=True)
class Verdict:
    """Either keep the original specifier or replace it with an alternative."""

    original: CandidateForm | None = None
    alternative: CandidateForm | None = None

    @property
    def is_replace(self) -> bool:
        return self.original is not None and self.alternative is not None

    @classmethod
    def keep(cls, original: CandidateForm | None = None) -> "Verdict":
        return cls(original, None)

    @classmethod
    def replace(cls, original: CandidateForm, alternative: CandidateForm) -> "Verdict":
        return cls(original, alternative)

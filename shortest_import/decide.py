"""Decision between the written specifier and its best alternative."""

from shortest_import.candidate_form import CandidateForm
from shortest_import.tie_break_policy import TieBreakPolicy
from shortest_import.verdict import Verdict


def decide(
    original: CandidateForm,
    alternative: CandidateForm | None,
    policy: TieBreakPolicy = TieBreakPolicy.KEEP_ORIGINAL,
) -> Verdict:
    """Return Replace only for a strictly shorter alternative or a policy tie."""
    if alternative is None or alternative.specifier_text == original.specifier_text:
        return Verdict.keep(original)

    if alternative.segment_count < original.segment_count:
        return Verdict.replace(original, alternative)

    if alternative.segment_count == original.segment_count:
        preferred = policy.preferred_kind()
        if preferred is not None and alternative.kind is preferred:
            return Verdict.replace(original, alternative)

    return Verdict.keep(original)

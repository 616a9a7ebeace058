"""Relevance Classifier - score extracted provider records against synonym terms"""

from typing import Iterable, List, Optional, Sequence, Tuple

from .models import ClassifiedProvider, RawProviderRecord, SearchResult

SNIPPET_CHARS = 150


def match_term(record: RawProviderRecord, terms: Sequence[str]) -> Optional[str]:
    """Return the first term (in list order) found in the record's text or specialty"""
    full_text = record.full_text.lower()
    specialty = record.specialty.lower()
    for term in terms:
        if term in full_text or term in specialty:
            return term
    return None


def make_snippet(full_text: str, limit: int = SNIPPET_CHARS) -> str:
    return full_text[:limit] + "..."


def accuracy(relevant: int, total: int) -> float:
    """Percentage of relevant records, rounded half-up to one decimal"""
    if total <= 0:
        return 0
    tenths = (relevant * 2000 + total) // (2 * total)
    return tenths / 10


def classify(records: Iterable[RawProviderRecord], terms: Sequence[str]) -> SearchResult:
    """Classify every record and summarise the run"""
    lowered: Tuple[str, ...] = tuple(t.lower() for t in terms)
    providers: List[ClassifiedProvider] = []
    relevant = 0

    for record in records:
        matched = match_term(record, lowered)
        if matched is not None:
            relevant += 1
        providers.append(ClassifiedProvider(
            name=record.name,
            specialty=record.specialty,
            full_text=record.full_text,
            relevant=matched is not None,
            matched_term=matched or "",
            snippet=make_snippet(record.full_text),
        ))

    total = len(providers)
    return SearchResult(
        total=total,
        relevant=relevant,
        irrelevant=total - relevant,
        accuracy=accuracy(relevant, total),
        providers=providers,
    )

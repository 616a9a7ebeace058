"""Data models shared by the registry, classifier, driver and API layer"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class SpecialtyConfig:
    """Specialty name plus the synonym terms used to judge relevance"""
    name: str
    terms: Tuple[str, ...]
    description: str = ""
    custom: bool = False

    @property
    def query(self) -> str:
        """Text typed into the specialty search field"""
        if self.custom:
            return self.terms[0]
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "terms": list(self.terms),
            "description": self.description,
        }


@dataclass(frozen=True)
class RawProviderRecord:
    """One provider card as read from the results page"""
    name: str
    specialty: str = ""
    full_text: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawProviderRecord":
        return cls(
            name=(data.get("name") or "").strip(),
            specialty=(data.get("specialty") or "").strip(),
            full_text=(data.get("fullText") or "").lower(),
        )


@dataclass(frozen=True)
class ClassifiedProvider:
    """Provider record with its relevance verdict"""
    name: str
    specialty: str
    full_text: str
    relevant: bool
    matched_term: str = ""
    snippet: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "specialty": self.specialty,
            "relevant": self.relevant,
            "matchedTerm": self.matched_term,
            "snippet": self.snippet,
        }


@dataclass
class SearchResult:
    """Relevance summary over every extracted provider"""
    total: int = 0
    relevant: int = 0
    irrelevant: int = 0
    accuracy: float = 0
    providers: List[ClassifiedProvider] = field(default_factory=list)
    warning: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "total": self.total,
            "relevant": self.relevant,
            "irrelevant": self.irrelevant,
            "accuracy": self.accuracy,
            "providers": [p.to_dict() for p in self.providers],
        }
        if self.warning:
            data["warning"] = self.warning
        return data


@dataclass(frozen=True)
class ProgressEvent:
    """Status update for one search session; step -1 means the run failed"""
    session_id: str
    message: str
    step: int
    total_steps: int

    @property
    def failed(self) -> bool:
        return self.step == -1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sessionId": self.session_id,
            "message": self.message,
            "step": self.step,
            "totalSteps": self.total_steps,
        }

from dataclasses import dataclass, field
from typing import Any, Optional

T_obj = dict[str, Any]

NO_ENTITY = "O"


@dataclass
class Token:
    """Mot analysé par le pipeline (forme, lemme, POS, entité)"""

    text: str
    offset: Optional[int] = None
    lemma: Optional[str] = None
    pos: Optional[str] = None
    ner: Optional[str] = None

    @property
    def is_entity(self) -> bool:
        """Vrai si l'étiquette d'entité n'est pas absente ou "O"."""
        return self.ner is not None and self.ner.upper() != NO_ENTITY


@dataclass
class Sentence:
    """Phrase avec sa liste de mots"""

    tokens: list[Token] = field(default_factory=list)
    line: Optional[int] = None

    @property
    def texte(self) -> str:
        return " ".join(t.text for t in self.tokens)


@dataclass
class Annotation:
    """Document annoté, tel que produit par le pipeline en amont."""

    sentences: Optional[list[Sentence]] = field(default_factory=list)
    text: Optional[str] = None
    doc_id: Optional[str] = None
    doc_date: Optional[str] = None
    doc_source_type: Optional[str] = None
    doc_type: Optional[str] = None
    author: Optional[str] = None
    location: Optional[str] = None

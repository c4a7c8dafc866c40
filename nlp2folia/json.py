"""
Lire la sortie JSON de CoreNLP comme graphe d'annotation
"""

import json
import logging
from typing import Optional, TextIO

from nlp2folia.folia import MalformedAnnotation
from nlp2folia.types import Annotation, Sentence, T_obj, Token

LOGGER = logging.getLogger("json")

# Clés JSON de CoreNLP pour les champs du document
DOCUMENT_KEYS = {
    "doc_id": "docId",
    "doc_date": "docDate",
    "doc_source_type": "docSourceType",
    "doc_type": "docType",
    "author": "author",
    "location": "location",
    "text": "text",
}


def token_from_corenlp(obj: T_obj) -> Token:
    text: Optional[str] = obj.get("word", obj.get("originalText"))
    offset = obj.get("characterOffsetBegin")
    return Token(
        text=text,  # type: ignore
        offset=None if offset is None else int(offset),
        lemma=obj.get("lemma"),
        pos=obj.get("pos"),
        ner=obj.get("ner"),
    )


def sentence_from_corenlp(obj: T_obj) -> Sentence:
    if obj.get("tokens") is None:
        raise MalformedAnnotation(
            "Phrase %s sans liste de mots" % obj.get("index", "?")
        )
    line = obj.get("line")
    return Sentence(
        tokens=[token_from_corenlp(tok) for tok in obj["tokens"]],
        line=None if line is None else int(line),
    )


def annotation_from_corenlp(obj: T_obj) -> Annotation:
    """Construire une Annotation à partir du JSON déjà décodé."""
    sentences = obj.get("sentences")
    if sentences is not None:
        sentences = [sentence_from_corenlp(s) for s in sentences]
    annotation = Annotation(
        sentences=sentences,
        **{field: obj.get(key) for field, key in DOCUMENT_KEYS.items()},
    )
    LOGGER.info(
        "Document %s: %d phrases",
        annotation.doc_id,
        0 if sentences is None else len(sentences),
    )
    return annotation


def load_corenlp(infh: TextIO) -> Annotation:
    return annotation_from_corenlp(json.load(infh))

"""
Convertir un document annoté en XML FoLiA
"""

import logging
from dataclasses import dataclass
from typing import Optional

import lxml.etree as ET

from nlp2folia.metadata import (
    DEFAULT_ANNOTATOR,
    DEFAULT_LANGUAGE,
    FOLIA_NS,
    add_metadata,
    folia_tag,
)
from nlp2folia.types import Annotation, Sentence, Token

LOGGER = logging.getLogger("folia")

XLINK_NS = "http://www.w3.org/1999/xlink"
XML_ID = "{http://www.w3.org/XML/1998/namespace}id"
FOLIA_VERSION = "1.4.0"
GENERATOR = "CoreNLP2FoLiA"
UNTITLED = "untitled"
PARAGRAPH_ID = "doc.p.1"

# Ordre d'émission des champs du document: (élément, attribut de Annotation)
DOCUMENT_FIELDS = [
    ("docId", "doc_id"),
    ("docDate", "doc_date"),
    ("docSourceType", "doc_source_type"),
    ("docType", "doc_type"),
    ("author", "author"),
    ("location", "location"),
]


class MalformedAnnotation(ValueError):
    """Le graphe d'annotation ne contient pas un champ obligatoire."""


@dataclass
class Options:
    """Options de sortie FoLiA"""

    include_text: bool = False
    pretty: bool = True
    indent: int = 2
    encoding: str = "UTF-8"
    annotator: str = DEFAULT_ANNOTATOR
    generator: str = GENERATOR
    language: str = DEFAULT_LANGUAGE
    document_id: str = UNTITLED
    # Reproduire le <t> en double des anciennes sorties (mots sans offset)
    duplicate_text: bool = False


def set_single_element(
    parent: ET._Element,
    name: str,
    value: Optional[str],
    attributes: Optional[dict[str, str]] = None,
) -> Optional[ET._Element]:
    """Ajouter <name>value</name> seulement si la valeur est présente."""
    if value is None:
        return None
    el = ET.SubElement(parent, folia_tag(name), attributes or {})
    el.text = value
    return el


def set_inline_element(
    parent: ET._Element, name: str, value: Optional[str]
) -> Optional[ET._Element]:
    """Ajouter <name class="value"/> seulement si la valeur est présente."""
    if value is None:
        return None
    el = ET.SubElement(parent, folia_tag(name))
    el.set("class", value)
    if name == "pos":
        el.set("head", value)
    return el


class FoliaBuilder:
    def __init__(self, options: Optional[Options] = None):
        self.options = Options() if options is None else options

    def make_root(self) -> ET._Element:
        root = ET.Element(
            folia_tag("FoLiA"), nsmap={None: FOLIA_NS, "xlink": XLINK_NS}
        )
        root.set(XML_ID, self.options.document_id)
        root.set("version", FOLIA_VERSION)
        root.set("generator", self.options.generator)
        return root

    def build_paragraph(
        self, parent: ET._Element, annotation: Annotation, paragraph_id: str
    ) -> ET._Element:
        # Un seul paragraphe par document, toutes les phrases y vont
        p = ET.SubElement(parent, folia_tag("p"))
        p.set(XML_ID, paragraph_id)
        if self.options.include_text:
            set_single_element(p, "t", annotation.text)
        if annotation.sentences is None:
            LOGGER.warning("%s: aucune phrase dans l'annotation", paragraph_id)
            return p
        for idx, sentence in enumerate(annotation.sentences, start=1):
            self.build_sentence(p, sentence, f"{paragraph_id}.s.{idx}")
        return p

    def build_sentence(
        self, parent: ET._Element, sentence: Sentence, sentence_id: str
    ) -> ET._Element:
        if sentence.tokens is None:
            raise MalformedAnnotation("Phrase %s sans liste de mots" % sentence_id)
        s = ET.SubElement(parent, folia_tag("s"))
        s.set(XML_ID, sentence_id)
        if sentence.line is not None:
            s.set("line", str(sentence.line))
        for idx, token in enumerate(sentence.tokens, start=1):
            self.build_word(s, token, self.word_id(sentence_id, idx))
        self.build_entities(s, sentence, sentence_id)
        LOGGER.debug("%s: %d mots", sentence_id, len(sentence.tokens))
        return s

    @staticmethod
    def word_id(sentence_id: str, idx: int) -> str:
        return f"{sentence_id}.w.{idx}"

    def build_word(
        self, parent: ET._Element, token: Token, word_id: str
    ) -> ET._Element:
        if token.text is None:
            raise MalformedAnnotation("Mot %s sans texte" % word_id)
        w = ET.SubElement(parent, folia_tag("w"))
        w.set(XML_ID, word_id)
        attributes = {}
        if token.offset is not None:
            attributes["offset"] = str(token.offset)
        elif self.options.duplicate_text:
            set_single_element(w, "t", token.text)
        set_single_element(w, "t", token.text, attributes)
        set_inline_element(w, "lemma", token.lemma)
        set_inline_element(w, "pos", token.pos)
        return w

    def build_entities(
        self, parent: ET._Element, sentence: Sentence, sentence_id: str
    ) -> ET._Element:
        entities_id = f"{sentence_id}.entities.1"
        entities = ET.SubElement(parent, folia_tag("entities"))
        entities.set(XML_ID, entities_id)
        counter = 1
        for idx, token in enumerate(sentence.tokens, start=1):
            if not token.is_entity:
                continue
            entity = ET.SubElement(entities, folia_tag("entity"))
            entity.set(XML_ID, f"{entities_id}.entity.{counter}")
            entity.set("class", token.ner)
            wref = ET.SubElement(entity, folia_tag("wref"))
            wref.set("id", self.word_id(sentence_id, idx))
            wref.set("t", token.text)
            counter += 1
        return entities

    def __call__(self, annotation: Annotation) -> ET._ElementTree:
        """Représentation FoLiA du document."""
        root = self.make_root()
        add_metadata(root, self.options.annotator, self.options.language)
        text = ET.SubElement(root, folia_tag("text"))
        for name, field_name in DOCUMENT_FIELDS:
            set_single_element(text, name, getattr(annotation, field_name))
        self.build_paragraph(text, annotation, PARAGRAPH_ID)
        return ET.ElementTree(root)


def annotation_to_doc(
    annotation: Annotation, options: Optional[Options] = None
) -> ET._ElementTree:
    return FoliaBuilder(options)(annotation)

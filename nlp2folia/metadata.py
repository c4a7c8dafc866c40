"""
Bloc de métadonnées FoLiA (déclarations des couches d'annotation).
"""

from typing import NamedTuple, Sequence

import lxml.etree as ET

FOLIA_NS = "http://ilk.uvt.nl/folia"
DEFAULT_ANNOTATOR = "CoreNLP"
DEFAULT_LANGUAGE = "en"


class Declaration(NamedTuple):
    """Déclaration d'une couche d'annotation produite automatiquement."""

    annotation: str
    annotatortype: str = "auto"


ANNOTATIONS: tuple[Declaration, ...] = (
    Declaration("token-annotation"),
    Declaration("phonological-annotation"),
    Declaration("morphological-annotation"),
    Declaration("pos-annotation"),
    Declaration("lemma-annotation"),
    Declaration("entity-annotation"),
)


def folia_tag(name: str) -> str:
    return f"{{{FOLIA_NS}}}{name}"


def add_metadata(
    root: ET._Element,
    annotator: str = DEFAULT_ANNOTATOR,
    language: str = DEFAULT_LANGUAGE,
    declarations: Sequence[Declaration] = ANNOTATIONS,
) -> ET._Element:
    """Ajouter l'élément metadata, indépendant du document, sous la racine."""
    metadata = ET.SubElement(root, folia_tag("metadata"))
    annotations = ET.SubElement(metadata, folia_tag("annotations"))
    for decl in declarations:
        el = ET.SubElement(annotations, folia_tag(decl.annotation))
        el.set("annotator", annotator)
        el.set("annotatortype", decl.annotatortype)
    meta = ET.SubElement(metadata, folia_tag("meta"))
    meta.set("id", "language")
    meta.text = language
    return metadata

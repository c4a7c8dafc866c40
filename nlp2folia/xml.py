"""
Écrire un document FoLiA en XML.
"""

import copy
import logging
from typing import BinaryIO, Optional

import lxml.etree as ET

from .folia import Options, annotation_to_doc
from .types import Annotation

LOGGER = logging.getLogger("xml")


class SerializationError(OSError):
    """Échec d'écriture du XML vers la sortie."""


def tostring(doc: ET._ElementTree, options: Optional[Options] = None) -> bytes:
    if options is None:
        options = Options()
    if options.pretty:
        # ET.indent modifie l'arbre, on travaille sur une copie
        doc = copy.deepcopy(doc)
        ET.indent(doc, space=" " * options.indent)
    return ET.tostring(
        doc,
        encoding=options.encoding,
        xml_declaration=True,
        pretty_print=False,
    )


def write_folia(
    doc: ET._ElementTree, outfh: BinaryIO, options: Optional[Options] = None
):
    data = tostring(doc, options)
    try:
        outfh.write(data)
        outfh.flush()
    except OSError as err:
        raise SerializationError("Impossible d'écrire le XML: %s" % err) from err


def print_folia(
    annotation: Annotation, outfh: BinaryIO, options: Optional[Options] = None
):
    """Convertir une annotation en FoLiA et l'écrire."""
    LOGGER.info("Écriture en format FoLiA")
    write_folia(annotation_to_doc(annotation, options), outfh, options)

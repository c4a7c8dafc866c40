"""
nlp2folia, sortie FoLiA pour les pipelines d'analyse linguistique

Ce module convertit un document déjà annoté (phrases, mots, lemmes,
parties du discours, entités nommées) en document XML FoLiA.
"""

from .folia import FoliaBuilder, MalformedAnnotation, Options, annotation_to_doc
from .json import annotation_from_corenlp, load_corenlp
from .types import Annotation, Sentence, Token
from .xml import SerializationError, print_folia, tostring, write_folia

VERSION = "0.1.0"

__all__ = [
    "Annotation",
    "FoliaBuilder",
    "MalformedAnnotation",
    "Options",
    "SerializationError",
    "Sentence",
    "Token",
    "annotation_from_corenlp",
    "annotation_to_doc",
    "load_corenlp",
    "print_folia",
    "tostring",
    "write_folia",
]

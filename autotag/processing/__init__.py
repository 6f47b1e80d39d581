"""
Processing Package.

Reading and writing of annotated corpora.
"""

from autotag.processing.conllu import (
    format_sentence,
    load_sentences,
    read_sentences,
    save_sentences,
    write_sentences,
)

__all__ = [
    "read_sentences",
    "format_sentence",
    "write_sentences",
    "load_sentences",
    "save_sentences",
]

"""
Core Constants Module.

This module defines the field conventions shared by the codecs and the
CoNLL-U reader/writer.
"""

# Field conventions
EMPTY_FIELD = "_"
FEATURE_SEPARATOR = "|"
FEATURE_ASSIGNMENT = "="
COLUMN_SEPARATOR = "\t"
COMMENT_PREFIX = "#"

# CoNLL-U column layout
CONLLU_COLUMNS = (
    "id",
    "form",
    "lemma",
    "upos",
    "xpos",
    "feats",
    "head",
    "deprel",
    "deps",
    "misc",
)
NUM_CONLLU_COLUMNS = len(CONLLU_COLUMNS)

# Token ids of multiword ranges (1-2) and empty nodes (1.1)
RANGE_SEPARATOR = "-"
EMPTY_NODE_SEPARATOR = "."

# Index of the synthetic root node
ROOT_INDEX = 0

# Layer tags, in the order they are listed by the CLI
LAYER_TAGS = ("upos", "xpos", "feature", "feature_string", "misc")

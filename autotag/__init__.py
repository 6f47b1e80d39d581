"""
Autotag: layer encoders for sequence tagging.

This package converts token annotations on dependency-tree sentences
(part-of-speech tags, morphological features, miscellaneous annotations)
to flat per-token labels for a sequence tagger, and applies predicted
labels back onto sentences.
"""

__version__ = "0.1.0"

"""
Structural Document Segmentation Engine

Locates the headings of a chapter/subchapter outline inside the plain-text
extraction of a document and partitions the text into contiguous spans,
each annotated with a token count and an inferred page range.
"""

__version__ = "0.1.0"

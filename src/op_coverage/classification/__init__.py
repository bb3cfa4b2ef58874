"""Capability classification of catalog operators"""

from .type_vocabulary import TYPE_VOCABULARY, UnknownTypeCode, lookup
from .classifiers import (
    CapabilityClassifier,
    DynamicRangeClassifier,
    SparsityClassifier,
    StaticQuantClassifier,
    DYNAMIC_RANGE_TRAIT,
    SPARSE_TRAIT,
    QUANTIZABLE_RESULT_TRAIT,
)
from .result import ClassificationResult
from .driver import ClassificationDriver, classify_catalog, default_classifiers

__all__ = [
    'TYPE_VOCABULARY',
    'UnknownTypeCode',
    'lookup',
    'CapabilityClassifier',
    'DynamicRangeClassifier',
    'SparsityClassifier',
    'StaticQuantClassifier',
    'DYNAMIC_RANGE_TRAIT',
    'SPARSE_TRAIT',
    'QUANTIZABLE_RESULT_TRAIT',
    'ClassificationResult',
    'ClassificationDriver',
    'classify_catalog',
    'default_classifiers',
]

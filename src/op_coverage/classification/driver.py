"""
Classification Driver - Runs every capability classifier over one catalog
"""

from typing import Iterable, List, Optional, Union

from ..ir.catalog import Catalog
from ..ir.operator import OperatorDef
from .classifiers import (
    CapabilityClassifier,
    DynamicRangeClassifier,
    SparsityClassifier,
    StaticQuantClassifier,
)
from .result import ClassificationResult


def default_classifiers() -> List[CapabilityClassifier]:
    """
    Build the standard classifier list in emission order.

    Dynamic-range pair, sparsity, then static quantization for
    int8/uint8 x per-axis/per-tensor.
    """
    return [
        DynamicRangeClassifier(),
        SparsityClassifier(),
        StaticQuantClassifier(is_signed=True, per_axis=True),
        StaticQuantClassifier(is_signed=True, per_axis=False),
        StaticQuantClassifier(is_signed=False, per_axis=True),
        StaticQuantClassifier(is_signed=False, per_axis=False),
    ]


class ClassificationDriver:
    """
    Sorts the catalog once and feeds it to each classifier in order.

    Each class's members come out sorted because every classifier walks
    the same sorted operator list.
    """

    def __init__(self, classifiers: Optional[List[CapabilityClassifier]] = None):
        """
        Initialize the driver.

        Args:
            classifiers: Classifiers in emission order (default: default_classifiers())
        """
        self.classifiers = classifiers if classifiers is not None else default_classifiers()

    def classify(self, catalog: Union[Catalog, Iterable[OperatorDef]]) -> ClassificationResult:
        """
        Classify every operator in the catalog.

        Args:
            catalog: Catalog (or iterable of OperatorDef) to classify

        Returns:
            A fresh ClassificationResult

        Raises:
            CatalogContractError: If the catalog is malformed
        """
        if not isinstance(catalog, Catalog):
            catalog = Catalog(catalog)
        catalog.validate()

        sorted_ops = catalog.sorted_ops()

        classes = []
        for classifier in self.classifiers:
            for class_name, members in classifier.classify(sorted_ops).items():
                classes.append((class_name, members))

        return ClassificationResult(classes)


def classify_catalog(catalog: Union[Catalog, Iterable[OperatorDef]]) -> ClassificationResult:
    """
    Convenience function to classify a catalog with the default classifiers.

    Example:
        >>> catalog = Catalog([OperatorDef('AddOp', traits=['SparseOpInterface'])])
        >>> classify_catalog(catalog)['ExportSparsitySpec']
        ('AddOp',)
    """
    return ClassificationDriver().classify(catalog)

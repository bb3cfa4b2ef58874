"""
Coverage Report - Tabulate which operators landed in which capability class
"""

from typing import Dict, List

import numpy as np

from ..classification.result import ClassificationResult
from ..ir.catalog import Catalog


class CoverageReport:
    """
    Operator x class membership table for one classification run.

    Rows follow the catalog's sorted operator order, columns follow the
    result's class order.
    """

    def __init__(self, result: ClassificationResult, catalog: Catalog):
        """
        Initialize the report.

        Args:
            result: Classification result to tabulate
            catalog: The catalog the result was computed from
        """
        self.result = result
        self.op_names: List[str] = [op.name for op in catalog.sorted_ops()]
        self.class_names: List[str] = result.class_names()

    def matrix(self) -> np.ndarray:
        """
        Build the membership matrix.

        Returns:
            bool array of shape (num_ops, num_classes)
        """
        row_index = {name: i for i, name in enumerate(self.op_names)}
        table = np.zeros((len(self.op_names), len(self.class_names)), dtype=bool)

        for col, class_name in enumerate(self.class_names):
            for op_name in self.result[class_name]:
                table[row_index[op_name], col] = True

        return table

    def class_counts(self) -> Dict[str, int]:
        """Number of member operators per class."""
        counts = self.matrix().sum(axis=0)
        return {name: int(count) for name, count in zip(self.class_names, counts)}

    def uncovered_ops(self) -> List[str]:
        """Operators that belong to no class, in sorted order."""
        if not self.class_names:
            return list(self.op_names)
        covered = self.matrix().any(axis=1)
        return [name for name, hit in zip(self.op_names, covered) if not hit]

    def summary(self) -> str:
        """
        Generate a human-readable summary.

        Returns:
            Multi-line text with per-class counts and the uncovered op count
        """
        lines = [f"Coverage over {len(self.op_names)} ops:"]
        width = max((len(name) for name in self.class_names), default=0)
        for name, count in self.class_counts().items():
            lines.append(f"  {name:<{width}}  {count}")
        lines.append(f"  Uncovered ops: {len(self.uncovered_ops())}")
        return "\n".join(lines)

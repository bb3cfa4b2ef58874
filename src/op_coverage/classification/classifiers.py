"""
Classifiers - Route operators into the quantization capability classes
"""

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Dict, List, Sequence, Tuple

from ..ir.operator import OperatorDef
from .predicates import (
    KERNEL_SUPPORT_MARKER,
    PER_AXIS_DIM_PATTERN,
    declaration_contains,
    declaration_matches_pattern,
    locate_input_argument,
    required_types_supported,
    trait_present,
)
from .type_vocabulary import lookup


DYNAMIC_RANGE_TRAIT = "DynamicRangeQuantizedOpInterface"
SPARSE_TRAIT = "SparseOpInterface"
QUANTIZABLE_RESULT_TRAIT = "QuantizableResult"

DYNAMIC_RANGE_SPEC = "ExportDynamicRangeSpec"
DYNAMIC_RANGE_WEIGHT_ONLY_SPEC = "ExportDynamicRangeWeightOnlySpec"
SPARSITY_SPEC = "ExportSparsitySpec"
STATIC_INT8_PER_AXIS_SPEC = "ExportStaticInt8PerAxisSpec"
STATIC_INT8_PER_TENSOR_SPEC = "ExportStaticInt8PerTensorSpec"
STATIC_UINT8_PER_AXIS_SPEC = "ExportStaticUInt8PerAxisSpec"
STATIC_UINT8_PER_TENSOR_SPEC = "ExportStaticUInt8PerTensorSpec"


class CapabilityClassifier(ABC):
    """
    Base class for capability classifiers.

    A classifier:
    - Selects operators carrying its trait
    - Applies its own predicates to each of them
    - Fills one or more output classes with the names that pass

    Operators must be passed in already sorted by name; the output lists
    keep that order.
    """

    class_names: Tuple[str, ...] = ()

    def __init__(self, trait: str):
        """
        Initialize a classifier.

        Args:
            trait: Trait identifier an operator must carry to be considered
        """
        self.trait = trait

    def applies_to(self, op: OperatorDef) -> bool:
        """Check if the operator carries this classifier's trait."""
        return trait_present(op, self.trait)

    @abstractmethod
    def classify(self, ops: Sequence[OperatorDef]) -> Dict[str, List[str]]:
        """
        Classify a sorted sequence of operators.

        Args:
            ops: Operators sorted by name

        Returns:
            Ordered mapping class name -> member names, keys in class_names order
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(trait='{self.trait}')"


class DynamicRangeClassifier(CapabilityClassifier):
    """
    Dynamic-range quantization support.

    Ops with the trait whose declaration carries the kernel-support marker
    go to the kernel-supported class, every other op with the trait goes to
    the weight-only fallback class. Both are filled in the same pass.
    """

    class_names = (DYNAMIC_RANGE_SPEC, DYNAMIC_RANGE_WEIGHT_ONLY_SPEC)

    def __init__(self, trait: str = DYNAMIC_RANGE_TRAIT, marker: str = KERNEL_SUPPORT_MARKER):
        """
        Initialize the dynamic-range classifier.

        Args:
            trait: Dynamic-range trait identifier
            marker: Declaration text signalling runtime kernel support
        """
        super().__init__(trait)
        self.marker = marker

    def classify(self, ops: Sequence[OperatorDef]) -> Dict[str, List[str]]:
        kernel_supported = []
        weight_only = []

        for op in ops:
            if not self.applies_to(op):
                continue

            if declaration_contains(op, self.marker):
                kernel_supported.append(op.name)
            else:
                weight_only.append(op.name)

        return OrderedDict([
            (DYNAMIC_RANGE_SPEC, kernel_supported),
            (DYNAMIC_RANGE_WEIGHT_ONLY_SPEC, weight_only),
        ])


class SparsityClassifier(CapabilityClassifier):
    """Sparse-kernel support: every op with the sparse trait."""

    class_names = (SPARSITY_SPEC,)

    def __init__(self, trait: str = SPARSE_TRAIT):
        super().__init__(trait)

    def classify(self, ops: Sequence[OperatorDef]) -> Dict[str, List[str]]:
        return OrderedDict([
            (SPARSITY_SPEC, [op.name for op in ops if self.applies_to(op)]),
        ])


class StaticQuantClassifier(CapabilityClassifier):
    """
    Static quantization support for one signedness and granularity.

    The op's input activation must accept float32 and the quantized 8-bit
    type (QI8 when signed, QUI8 otherwise). Per-axis support additionally
    requires the op to declare a per-channel quantization dimension.
    """

    _CLASS_NAMES = {
        (True, True): STATIC_INT8_PER_AXIS_SPEC,
        (True, False): STATIC_INT8_PER_TENSOR_SPEC,
        (False, True): STATIC_UINT8_PER_AXIS_SPEC,
        (False, False): STATIC_UINT8_PER_TENSOR_SPEC,
    }

    def __init__(self, is_signed: bool, per_axis: bool, trait: str = QUANTIZABLE_RESULT_TRAIT):
        """
        Initialize a static quantization classifier.

        Args:
            is_signed: True for int8 (QI8), False for uint8 (QUI8)
            per_axis: True for per-axis, False for per-tensor quantization
            trait: Quantizable-result trait identifier
        """
        super().__init__(trait)
        self.is_signed = is_signed
        self.per_axis = per_axis
        self.class_name = self._CLASS_NAMES[(is_signed, per_axis)]
        self.class_names = (self.class_name,)

    @property
    def required_types(self) -> List[str]:
        """Type descriptions the input argument's constraint must list."""
        return [lookup('F32'), lookup('QI8' if self.is_signed else 'QUI8')]

    def matches(self, op: OperatorDef) -> bool:
        """
        Check a single operator against this class.

        Args:
            op: Operator to test

        Returns:
            True if the operator belongs to the class
        """
        if not self.applies_to(op):
            return False

        input_idx = locate_input_argument(op)
        if not required_types_supported(op, input_idx, self.required_types, self.per_axis):
            return False

        if self.per_axis:
            return declaration_matches_pattern(op, PER_AXIS_DIM_PATTERN)
        return True

    def classify(self, ops: Sequence[OperatorDef]) -> Dict[str, List[str]]:
        return OrderedDict([
            (self.class_name, [op.name for op in ops if self.matches(op)]),
        ])

    def __repr__(self) -> str:
        return (f"StaticQuantClassifier(is_signed={self.is_signed}, "
                f"per_axis={self.per_axis}, trait='{self.trait}')")

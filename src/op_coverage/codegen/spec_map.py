"""
Mapping from capability classes to the getters emitted for them
"""

from ..classification.classifiers import (
    DYNAMIC_RANGE_SPEC,
    DYNAMIC_RANGE_WEIGHT_ONLY_SPEC,
    SPARSITY_SPEC,
    STATIC_INT8_PER_AXIS_SPEC,
    STATIC_INT8_PER_TENSOR_SPEC,
    STATIC_UINT8_PER_AXIS_SPEC,
    STATIC_UINT8_PER_TENSOR_SPEC,
)


class SpecMapping:
    """Maps capability class names to getter declarations and documentation."""

    # Emission order of the generated getters
    CLASS_ORDER = (
        DYNAMIC_RANGE_SPEC,
        DYNAMIC_RANGE_WEIGHT_ONLY_SPEC,
        SPARSITY_SPEC,
        STATIC_INT8_PER_AXIS_SPEC,
        STATIC_INT8_PER_TENSOR_SPEC,
        STATIC_UINT8_PER_AXIS_SPEC,
        STATIC_UINT8_PER_TENSOR_SPEC,
    )

    CLASS_DESCRIPTIONS = {
        DYNAMIC_RANGE_SPEC: 'Ops with kernel support for dynamic-range quantization',
        DYNAMIC_RANGE_WEIGHT_ONLY_SPEC: 'Dynamic-range ops limited to weight-only quantization',
        SPARSITY_SPEC: 'Ops with sparse kernel support',
        STATIC_INT8_PER_AXIS_SPEC: 'Ops supporting static int8 per-axis quantization',
        STATIC_INT8_PER_TENSOR_SPEC: 'Ops supporting static int8 per-tensor quantization',
        STATIC_UINT8_PER_AXIS_SPEC: 'Ops supporting static uint8 per-axis quantization',
        STATIC_UINT8_PER_TENSOR_SPEC: 'Ops supporting static uint8 per-tensor quantization',
    }

    @staticmethod
    def get_description(class_name: str) -> str:
        """
        Get the one-line description emitted above a getter.

        Args:
            class_name: The capability class name

        Returns:
            The description
        """
        if class_name not in SpecMapping.CLASS_DESCRIPTIONS:
            raise ValueError(f"Unsupported capability class: {class_name}")
        return SpecMapping.CLASS_DESCRIPTIONS[class_name]

    @staticmethod
    def get_signature(class_name: str) -> str:
        """Get the C++ declaration of the getter for a class."""
        if class_name not in SpecMapping.CLASS_DESCRIPTIONS:
            raise ValueError(f"Unsupported capability class: {class_name}")
        return f"const std::set<std::string> &{class_name}()"

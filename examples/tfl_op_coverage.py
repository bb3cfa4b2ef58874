"""
Example: Generating op coverage spec getters for a few TFLite ops

This example builds a small catalog by hand, classifies it and writes
the C++ spec getters to generated/op_coverage_spec_getters.inc.
"""

from op_coverage.generator import generate_spec_getters
from op_coverage.ir import Catalog


FLOAT_AND_8BIT = "tensor of 32-bit float or QI8 type or QUI8 type values"

RECORDS = [
    {
        'name': 'Conv2DOp',
        'traits': ['QuantizableResult', 'DynamicRangeQuantizedOpInterface', 'SparseOpInterface'],
        'extra_class_declaration': (
            "// Quantized axis of the filter\n"
            "int GetQuantizationDimIndex() { return 0; }\n"
            "bool GetDynamicRangeQuantKernelSupport() { return true; }\n"
        ),
        'arguments': [
            {'name': 'input', 'type_constraint': {'runtime_type_description': FLOAT_AND_8BIT}},
            {'name': 'filter', 'type_constraint': {'runtime_type_description': FLOAT_AND_8BIT}},
            {'name': 'bias', 'type_constraint': None},
        ],
        'base_classes': ['TFL_Op'],
    },
    {
        'name': 'UnidirectionalSequenceLSTMOp',
        'traits': ['DynamicRangeQuantizedOpInterface'],
        'arguments': [
            {'name': 'input', 'type_constraint': {'runtime_type_description': 'tensor of 32-bit float values'}},
        ],
        'base_classes': ['TFL_Op'],
    },
    {
        'name': 'AddOp',
        'traits': ['QuantizableResult'],
        'arguments': [
            {'name': 'lhs', 'type_constraint': {'runtime_type_description': FLOAT_AND_8BIT}},
            {'name': 'rhs', 'type_constraint': {'runtime_type_description': FLOAT_AND_8BIT}},
        ],
        'base_classes': ['TFL_Op'],
    },
]


def main():
    """Main example function."""
    catalog = Catalog.from_records(RECORDS)
    print(catalog.print_catalog())
    print()

    output_path = "generated/op_coverage_spec_getters.inc"
    result = generate_spec_getters(
        catalog,
        output_path=output_path,
        verbose=True,
        op_base_class='TFL_Op'
    )

    print("\nCapability classes:")
    for class_name, members in result:
        print(f"  {class_name}: {', '.join(members) or '-'}")
    print()


if __name__ == "__main__":
    main()

"""
Shared catalog fixtures for the op coverage tests
"""

import os
import sys

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from op_coverage.ir import Argument, Catalog, OperatorDef, TypeConstraint


ALL_8BIT = "tensor of 32-bit float or QI8 type or QUI8 type values"
SIGNED_ONLY = "tensor of 32-bit float or QI8 type values"


def _arg(name, description=None):
    constraint = TypeConstraint(description) if description is not None else None
    return Argument(name, constraint)


@pytest.fixture
def make_op():
    """Factory for OperatorDef with short-hand arguments: [(name, description-or-None)]."""
    def _make(name, traits=(), declaration="", args=(), base_classes=()):
        return OperatorDef(
            name=name,
            traits=traits,
            extra_class_declaration=declaration,
            arguments=[_arg(arg_name, desc) for arg_name, desc in args],
            base_classes=base_classes,
        )
    return _make


@pytest.fixture
def tfl_catalog(make_op):
    """
    A small catalog covering every capability class.

    Ops are listed out of order on purpose.
    """
    return Catalog([
        make_op(
            'ReshapeOp',
            traits=['QuantizableResult'],
            args=[('input', None), ('shape', 'tensor of 32-bit signless integer values')],
        ),
        make_op(
            'FullyConnectedOp',
            traits=['QuantizableResult', 'DynamicRangeQuantizedOpInterface', 'SparseOpInterface'],
            declaration=(
                "int GetQuantizationDimIndex() { return 0; }\n"
                "bool GetDynamicRangeQuantKernelSupport() { return true; }"
            ),
            args=[('input', ALL_8BIT), ('filter', ALL_8BIT), ('bias', None)],
        ),
        make_op(
            'AddOp',
            traits=['QuantizableResult'],
            args=[('lhs', ALL_8BIT), ('rhs', 'tensor of 32-bit float values')],
        ),
        make_op(
            'LSTMOp',
            traits=['DynamicRangeQuantizedOpInterface'],
            declaration="bool GetDynamicRangeQuantKernelSupport() { return false; }",
            args=[('input', ALL_8BIT)],
        ),
        make_op(
            'Conv2DOp',
            traits=['QuantizableResult', 'DynamicRangeQuantizedOpInterface', 'SparseOpInterface'],
            declaration=(
                "int GetQuantizationDimIndex() { return 0; } "
                "bool GetDynamicRangeQuantKernelSupport() { return true; }"
            ),
            args=[('input', ALL_8BIT), ('filter', ALL_8BIT), ('bias', None)],
        ),
        make_op(
            'MeanOp',
            traits=['QuantizableResult'],
            declaration="int GetQuantizationDimIndex() { return -1; }",
            args=[('input', SIGNED_ONLY), ('axis', None)],
        ),
        make_op('CastOp', args=[('input', None)]),
        make_op(
            'EmbeddingLookupOp',
            traits=['DynamicRangeQuantizedOpInterface'],
            declaration="bool GetDynamicRangeQuantKernelSupport() {\nreturn true; }",
            args=[('lookup', None), ('value', ALL_8BIT)],
        ),
        make_op(
            'DepthwiseConv2DOp',
            traits=['QuantizableResult'],
            declaration="int GetQuantizationDimIndex() { return 3; }",
            args=[('input', SIGNED_ONLY), ('filter', SIGNED_ONLY), ('bias', None)],
        ),
    ])


@pytest.fixture
def expected_classes():
    """Expected membership of every class for tfl_catalog, in emission order."""
    return [
        ('ExportDynamicRangeSpec', ('Conv2DOp', 'EmbeddingLookupOp', 'FullyConnectedOp')),
        ('ExportDynamicRangeWeightOnlySpec', ('LSTMOp',)),
        ('ExportSparsitySpec', ('Conv2DOp', 'FullyConnectedOp')),
        ('ExportStaticInt8PerAxisSpec', ('Conv2DOp', 'DepthwiseConv2DOp', 'FullyConnectedOp')),
        ('ExportStaticInt8PerTensorSpec', (
            'AddOp', 'Conv2DOp', 'DepthwiseConv2DOp', 'FullyConnectedOp', 'MeanOp', 'ReshapeOp',
        )),
        ('ExportStaticUInt8PerAxisSpec', ('Conv2DOp', 'FullyConnectedOp')),
        ('ExportStaticUInt8PerTensorSpec', ('AddOp', 'Conv2DOp', 'FullyConnectedOp', 'ReshapeOp')),
    ]

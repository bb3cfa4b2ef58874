"""
Tests for the classification driver and result
"""

import pytest

from op_coverage.classification import (
    ClassificationDriver,
    ClassificationResult,
    SparsityClassifier,
    classify_catalog,
    default_classifiers,
)
from op_coverage.codegen import SpecMapping
from op_coverage.ir import Catalog, CatalogContractError


class TestClassificationDriver:
    """Test end-to-end classification of a catalog"""

    def test_expected_membership(self, tfl_catalog, expected_classes):
        """Test every class of the sample catalog"""
        result = classify_catalog(tfl_catalog)
        assert result.items() == expected_classes

    def test_class_order(self, tfl_catalog):
        """Test that classes come out in the documented emission order"""
        result = classify_catalog(tfl_catalog)
        assert tuple(result.class_names()) == SpecMapping.CLASS_ORDER

    def test_default_classifier_order(self):
        """Test the default classifier list"""
        names = [name for classifier in default_classifiers() for name in classifier.class_names]
        assert tuple(names) == SpecMapping.CLASS_ORDER

    def test_members_sorted_without_duplicates(self, tfl_catalog):
        """Test that every class is strictly ascending"""
        result = classify_catalog(tfl_catalog)

        for _, members in result:
            assert list(members) == sorted(set(members))

    def test_dynamic_range_partition(self, tfl_catalog):
        """Test that kernel-supported and weight-only split the trait-bearing ops"""
        result = classify_catalog(tfl_catalog)
        kernel = set(result['ExportDynamicRangeSpec'])
        weight_only = set(result['ExportDynamicRangeWeightOnlySpec'])
        with_trait = {op.name for op in tfl_catalog if op.has_trait('DynamicRangeQuantizedOpInterface')}

        assert kernel.isdisjoint(weight_only)
        assert kernel | weight_only == with_trait

    def test_sparsity_is_trait_set(self, tfl_catalog):
        """Test that the sparsity class is exactly the ops with the sparse trait"""
        result = classify_catalog(tfl_catalog)
        with_trait = {op.name for op in tfl_catalog if op.has_trait('SparseOpInterface')}

        assert set(result['ExportSparsitySpec']) == with_trait

    def test_per_axis_subset_of_per_tensor(self, tfl_catalog):
        """Test that per-axis classes are contained in per-tensor classes"""
        result = classify_catalog(tfl_catalog)

        assert set(result['ExportStaticInt8PerAxisSpec']) <= set(result['ExportStaticInt8PerTensorSpec'])
        assert set(result['ExportStaticUInt8PerAxisSpec']) <= set(result['ExportStaticUInt8PerTensorSpec'])

    def test_only_catalog_ops_emitted(self, tfl_catalog):
        """Test that no class names an operator outside the catalog"""
        result = classify_catalog(tfl_catalog)

        for _, members in result:
            for name in members:
                assert name in tfl_catalog

    def test_idempotent(self, tfl_catalog):
        """Test that classifying twice gives identical output"""
        driver = ClassificationDriver()
        first = driver.classify(tfl_catalog)
        second = driver.classify(tfl_catalog)

        assert first == second
        assert first.items() == second.items()
        assert first is not second

    def test_catalog_not_reordered(self, tfl_catalog):
        """Test that classification leaves the catalog order untouched"""
        before = [op.name for op in tfl_catalog]
        classify_catalog(tfl_catalog)
        assert [op.name for op in tfl_catalog] == before

    def test_foo_op_signed_scenario(self, make_op):
        """Test a QI8 op with a per-channel accessor"""
        catalog = Catalog([make_op(
            'FooOp',
            traits=['QuantizableResult'],
            declaration="int GetQuantizationDimIndex() { return 3; }",
            args=[('input', 'tensor of 32-bit float or QI8 type values')],
        )])

        result = classify_catalog(catalog)

        assert result.membership('FooOp') == [
            'ExportStaticInt8PerAxisSpec',
            'ExportStaticInt8PerTensorSpec',
        ]

    def test_kernel_marker_scenario(self, make_op):
        """Test two dynamic-range ops that differ only by the kernel marker"""
        catalog = Catalog([
            make_op('WithKernelOp', traits=['DynamicRangeQuantizedOpInterface'],
                    declaration="bool GetDynamicRangeQuantKernelSupport() { return true; }"),
            make_op('WithoutKernelOp', traits=['DynamicRangeQuantizedOpInterface']),
        ])

        result = classify_catalog(catalog)

        assert result.membership('WithKernelOp') == ['ExportDynamicRangeSpec']
        assert result.membership('WithoutKernelOp') == ['ExportDynamicRangeWeightOnlySpec']

    def test_accepts_plain_iterable(self, make_op):
        """Test classifying a list of operators instead of a Catalog"""
        result = classify_catalog([make_op('BOp', traits=['SparseOpInterface']),
                                   make_op('AOp', traits=['SparseOpInterface'])])
        assert result['ExportSparsitySpec'] == ('AOp', 'BOp')

    def test_custom_classifiers(self, tfl_catalog):
        """Test a driver restricted to one classifier"""
        result = ClassificationDriver([SparsityClassifier()]).classify(tfl_catalog)
        assert result.class_names() == ['ExportSparsitySpec']

    def test_duplicate_names_rejected(self, make_op):
        """Test that a catalog with duplicate names produces no result"""
        catalog = Catalog([make_op('AddOp'), make_op('AddOp')])

        with pytest.raises(CatalogContractError, match="more than once"):
            classify_catalog(catalog)

    def test_malformed_input_argument_rejected(self, make_op):
        """Test that a quantizable op without arguments aborts classification"""
        catalog = Catalog([make_op('FooOp', traits=['QuantizableResult'])])

        with pytest.raises(CatalogContractError):
            classify_catalog(catalog)


class TestClassificationResult:
    """Test ClassificationResult accessors"""

    def test_accessors(self):
        """Test lookup, iteration and length"""
        result = ClassificationResult([('ExportSparsitySpec', ['AOp']), ('ExportDynamicRangeSpec', [])])

        assert result['ExportSparsitySpec'] == ('AOp',)
        assert result.get_class('ExportDynamicRangeSpec') == ()
        assert result.class_names() == ['ExportSparsitySpec', 'ExportDynamicRangeSpec']
        assert len(result) == 2
        assert list(result) == [('ExportSparsitySpec', ('AOp',)), ('ExportDynamicRangeSpec', ())]

    def test_repeated_access_is_stable(self):
        """Test that accessors return the same value on every call"""
        result = ClassificationResult([('ExportSparsitySpec', ['AOp', 'BOp'])])
        assert result['ExportSparsitySpec'] is result['ExportSparsitySpec']

    def test_unknown_class(self):
        """Test that asking for an unknown class raises ValueError"""
        result = ClassificationResult([])

        with pytest.raises(ValueError, match="Unknown capability class"):
            result['ExportFloat16Spec']

    def test_membership_of_unclassified_op(self):
        """Test membership of an operator in no class"""
        result = ClassificationResult([('ExportSparsitySpec', ['AOp'])])
        assert result.membership('BOp') == []

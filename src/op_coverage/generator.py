"""
Main entry point for op coverage spec generation
"""

from typing import Iterable, Optional, Union

from .analysis.coverage import CoverageReport
from .classification.driver import ClassificationDriver
from .classification.result import ClassificationResult
from .codegen.cc_printer import CCPrinter
from .ir.catalog import Catalog
from .ir.operator import OperatorDef


class OpCoverageGenerator:
    """
    Orchestrates the generation pipeline.

    Pipeline:
    1. Select and validate the catalog
    2. Classification: sort once, run every capability classifier
    3. Codegen: emit the C++ spec getters (optional)
    """

    def __init__(self, verbose: bool = False, op_base_class: Optional[str] = None):
        """
        Initialize the generator.

        Args:
            verbose: If True, print progress and a coverage summary
            op_base_class: Only consider operators deriving from this record
                class (None considers every operator)
        """
        self.verbose = verbose
        self.op_base_class = op_base_class
        self.driver = ClassificationDriver()

    def generate(
        self,
        catalog: Union[Catalog, Iterable[OperatorDef]],
        output_path: Optional[str] = None
    ) -> ClassificationResult:
        """
        Classify a catalog and optionally write the spec getters.

        Nothing is written unless classification succeeds.

        Args:
            catalog: The operator catalog
            output_path: File to write the generated C++ to (None to skip)

        Returns:
            The classification result
        """
        if not isinstance(catalog, Catalog):
            catalog = Catalog(catalog)

        self._log("=" * 60)
        self._log("Op Coverage Spec Generator")
        self._log("=" * 60)

        # Step 1: Select and validate
        self._log("\n[1/3] Validating catalog...")
        catalog.validate()
        self._log(f"  ✓ {len(catalog)} ops validated")
        if self.op_base_class is not None:
            catalog = catalog.derived_from(self.op_base_class)
            self._log(f"  ✓ Selected {len(catalog)} ops deriving from {self.op_base_class}")

        # Step 2: Classification
        self._log("\n[2/3] Classifying operators...")
        result = self.driver.classify(catalog)
        self._log(f"  ✓ Built {len(result)} capability classes")

        if self.verbose:
            self._log("")
            self._log(CoverageReport(result, catalog).summary())

        # Step 3: Code Generation
        if output_path is None:
            return result

        self._log("\n[3/3] Emitting spec getters...")
        CCPrinter(result).write(output_path)
        self._log(f"  ✓ Wrote {output_path}")

        return result

    def _log(self, message: str) -> None:
        """Print a log message if verbose mode is enabled."""
        if self.verbose:
            print(message)


def generate_spec_getters(
    catalog: Union[Catalog, Iterable[OperatorDef]],
    output_path: Optional[str] = None,
    verbose: bool = False,
    op_base_class: Optional[str] = None
) -> ClassificationResult:
    """
    Convenience function to classify a catalog and emit its spec getters.

    Args:
        catalog: The operator catalog
        output_path: File to write the generated C++ to (None to skip)
        verbose: If True, print progress
        op_base_class: Only consider operators deriving from this record class

    Returns:
        The classification result

    Example:
        >>> catalog = load_catalog("tfl_ops.json")
        >>> result = generate_spec_getters(catalog, "op_coverage_spec_getters.inc")
        >>> result['ExportSparsitySpec']
    """
    generator = OpCoverageGenerator(verbose=verbose, op_base_class=op_base_class)
    return generator.generate(catalog, output_path)

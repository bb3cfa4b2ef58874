"""Coverage analysis of classification results"""

from .coverage import CoverageReport

__all__ = ['CoverageReport']

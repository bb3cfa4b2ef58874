"""
Op Coverage Spec Generator

Classifies a compiler's operator catalog into quantization capability
classes (dynamic-range, sparsity, static int8/uint8 per-axis/per-tensor)
and emits the sorted operator sets as C++ spec getters.
"""

__version__ = "0.1.0"

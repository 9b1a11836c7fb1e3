from .suffix_array import SuffixArray

__all__ = ["SuffixArray"]

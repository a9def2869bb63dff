"""Algorithms and data structures for competitive programming: bitmasks, FFT/NTT, big integers, ordered sets and splay trees."""

__version__ = "0.1.0"

__all__ = [
    "bignum",
    "bitmasks",
    "count_pairs",
    "fft",
    "ntt",
    "ordered_set",
    "prefix_max",
    "splay_lazy",
    "splay_tree",
    "submask",
    "subsequences",
    "xor_basis",
]
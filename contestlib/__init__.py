"""Segment and sparse tables, disjoint sets, link-cut and Euler-tour trees, matrices, SCC and binary lifting."""

__version__ = "0.1.0"
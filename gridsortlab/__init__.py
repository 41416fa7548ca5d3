"""ShearSort on square matrices, merge sort and binary search, with sequential and thread-pool forms."""

__version__ = "0.1.0"
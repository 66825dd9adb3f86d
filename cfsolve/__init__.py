"""Solutions to competitive-programming warm-up problems, with a small judge-style command line."""

__version__ = "0.1.0"
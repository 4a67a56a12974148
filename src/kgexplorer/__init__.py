"""Knowledge graph explorer for triples extracted from research publications."""

__version__ = "0.1.0"

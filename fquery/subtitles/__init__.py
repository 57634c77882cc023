from . import aggregator, parser

__all__ = [
    "aggregator",
    "parser",
]

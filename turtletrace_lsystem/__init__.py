from .grammar import LSystem, turn, walk
from .programs import arrowhead, arrowhead_system, koch_curve, koch_snowflake

__all__ = [
    "LSystem",
    "arrowhead",
    "arrowhead_system",
    "koch_curve",
    "koch_snowflake",
    "turn",
    "walk",
]

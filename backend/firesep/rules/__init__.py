"""Classification-specific rule sets."""

from firesep.rules.class1 import assess_class1_wall
from firesep.rules.class2to9 import assess_class2to9_wall

__all__ = ["assess_class1_wall", "assess_class2to9_wall"]

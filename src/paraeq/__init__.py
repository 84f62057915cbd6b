from .common import OutputFormat
from .document import EquationNumberer, number_equations
from .equations import LabeledEquation, find_labeled_equation
from .registry import EquationRegistry

__all__ = [
    "EquationNumberer",
    "EquationRegistry",
    "LabeledEquation",
    "OutputFormat",
    "find_labeled_equation",
    "number_equations",
]

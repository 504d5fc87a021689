"""json-analyzer package root."""

from json_analyzer.data_type import DataType
from json_analyzer.declare import Declarations, declare
from json_analyzer.exceptions import NeverRaise, NeverThrown
from json_analyzer.inference import infer, infer_all, unify
from json_analyzer.invariants import never

__all__ = [
    "__version__",
    "DataType",
    "Declarations",
    "NeverRaise",
    "NeverThrown",
    "declare",
    "infer",
    "infer_all",
    "never",
    "unify",
]

__version__ = "0.1.0"

# Core type aliases for Pigment's data model.
# Plain Python types stand in for most of the runtime values:
# - numbers -> float
# - strings -> str
# - vectors -> list
# Functions and paint commands get their own small classes (see pigment.types).
#
# Naming guidance:
# - Node:  Use in reader/parser code to denote syntactic forms.
# - Value: Use in evaluator/runtime code to denote evaluated values.

import logging
from typing import Any, Callable

Node = Any
Value = Any

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., Value]

logging.getLogger(__name__).addHandler(logging.NullHandler())

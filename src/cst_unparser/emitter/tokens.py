"""
Keyword and operator tokens used by the emission rules.
"""

from typing import Dict

DEFAULT_DELIMITER = ", "

K_RETURN = "return"
K_YIELD = "yield"
K_DEL = "del"
K_ASSERT = "assert"
K_RAISE = "raise"
K_FROM = "from"
K_PASS = "pass"
K_BREAK = "break"
K_CONTINUE = "continue"
K_GLOBAL = "global"
K_NONLOCAL = "nonlocal"
K_AWAIT = "await"
K_ASYNC = "async"
K_LAMBDA = "lambda"

BINARY_OPERATORS: Dict[str, str] = {
  "Add": "+",
  "Subtract": "-",
  "Multiply": "*",
  "Divide": "/",
  "FloorDivide": "//",
  "Modulo": "%",
  "Power": "**",
  "MatrixMultiply": "@",
  "LeftShift": "<<",
  "RightShift": ">>",
  "BitOr": "|",
  "BitAnd": "&",
  "BitXor": "^",
}

AUGMENTED_OPERATORS: Dict[str, str] = {f"{kind}Assign": f"{token}=" for kind, token in BINARY_OPERATORS.items()}

UNARY_OPERATORS: Dict[str, str] = {
  "Plus": "+",
  "Minus": "-",
  "BitInvert": "~",
  "Not": "not ",
}

COMPARISON_OPERATORS: Dict[str, str] = {
  "LessThan": "<",
  "GreaterThan": ">",
  "Equal": "==",
  "NotEqual": "!=",
  "LessThanEqual": "<=",
  "GreaterThanEqual": ">=",
  "In": "in",
  "NotIn": "not in",
  "Is": "is",
  "IsNot": "is not",
}

BOOLEAN_OPERATORS: Dict[str, str] = {
  "Or": "or",
  "And": "and",
}

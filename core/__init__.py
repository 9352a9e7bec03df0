"""核心模块 - Token系统、操作符、RPN评估器和中缀转换器"""
from .errors import (
    ExpressionError, UnknownToken, UnknownOperator, MalformedExpression,
    EmptyExpression, StackUnderflow, DivisionByZero
)
from .operators import OperatorKind, OperatorSpec, OPERATOR_TABLE, build_operator_table, Operators
from .token_system import TokenType, Token, RPNValidator, make_token, tokenize, ensure_tokens
from .rpn_evaluator import RPNEvaluator
from .infix_converter import InfixConverter

__all__ = [
    'ExpressionError', 'UnknownToken', 'UnknownOperator', 'MalformedExpression',
    'EmptyExpression', 'StackUnderflow', 'DivisionByZero',
    'OperatorKind', 'OperatorSpec', 'OPERATOR_TABLE', 'build_operator_table', 'Operators',
    'TokenType', 'Token', 'RPNValidator', 'make_token', 'tokenize', 'ensure_tokens',
    'RPNEvaluator', 'InfixConverter'
]

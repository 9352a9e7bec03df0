"""core/token_system.py"""
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.errors import UnknownToken
from core.operators import OPERATOR_TABLE

logger = logging.getLogger(__name__)

# 十进制数字字面量，如 3, -2, 0.5, .5, 1e3
NUMBER_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符


@dataclass(frozen=True)
class Token:
    type: TokenType
    name: str
    value: Optional[float] = None
    position: Optional[int] = None

    @property
    def is_operand(self):
        return self.type == TokenType.OPERAND

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def __str__(self):
        return self.name


def make_token(text, position=None, operator_table=None, unknown_error=UnknownToken):
    """把单个字符串转换为Token，无法识别时抛出 unknown_error"""
    if operator_table is None:
        operator_table = OPERATOR_TABLE

    if text in operator_table:
        return Token(TokenType.OPERATOR, text, position=position)
    if NUMBER_PATTERN.match(text):
        return Token(TokenType.OPERAND, text, value=float(text), position=position)

    logger.debug(f"Rejected token {text!r} at position {position}")
    raise unknown_error(f"Unknown token {text!r}", token=text, position=position)


def tokenize(expression, operator_table=None, unknown_error=UnknownToken):
    """按空白切分表达式字符串并生成Token序列"""
    return [
        make_token(text, position, operator_table, unknown_error)
        for position, text in enumerate(expression.split())
    ]


def ensure_tokens(expression, operator_table=None, unknown_error=UnknownToken):
    """
    统一输入：字符串、字符串序列或Token序列
    Returns:
        list[Token]
    """
    if isinstance(expression, str):
        return tokenize(expression, operator_table, unknown_error)

    tokens = []
    for position, item in enumerate(expression):
        if isinstance(item, Token):
            tokens.append(item)
        else:
            tokens.append(make_token(str(item), position, operator_table, unknown_error))
    return tokens


class RPNValidator:

    @staticmethod
    def calculate_stack_size(token_sequence):
        """计算扫描完序列后栈中的元素数量（操作数+1，二元操作符-1）"""
        stack_size = 0
        for token in token_sequence:
            if token.is_operand:
                stack_size += 1
            else:
                stack_size -= 1
        return stack_size

    @staticmethod
    def is_valid(token_sequence):
        """
        完整RPN序列的合法性：
        第一个token之后计数器不能低于1，结束时恰好为1
        """
        if not token_sequence:
            return False

        stack_size = 0
        for token in token_sequence:
            if token.is_operand:
                stack_size += 1
            else:
                stack_size -= 1
            if stack_size < 1:
                return False

        return stack_size == 1

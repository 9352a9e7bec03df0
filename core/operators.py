"""core/operators.py"""
import logging
from collections import namedtuple
from enum import Enum
from types import MappingProxyType

import numpy as np

from config.config import OPERATOR_CONFIG, EVALUATOR_CONFIG, DIVISION_POLICIES
from core.errors import DivisionByZero

logger = logging.getLogger(__name__)


class OperatorKind(Enum):
    """封闭的操作符集合"""
    POW = '^'
    MUL = '*'
    DIV = '/'
    ADD = '+'
    SUB = '-'


# 操作符表中的一条记录
OperatorSpec = namedtuple('OperatorSpec', ['symbol', 'rank', 'kind'])


def build_operator_table(precedence=None):
    """
    根据优先级字典构建只读操作符表
    Args:
        precedence: 符号 -> 整数优先级，默认取 OPERATOR_CONFIG
    Returns:
        MappingProxyType: 符号 -> OperatorSpec
    """
    if precedence is None:
        precedence = OPERATOR_CONFIG["precedence"]

    table = {}
    for symbol, rank in precedence.items():
        try:
            kind = OperatorKind(symbol)
        except ValueError:
            raise ValueError(f"Unsupported operator symbol: {symbol!r}") from None
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise ValueError(f"Precedence of {symbol!r} must be an integer, got {rank!r}")
        table[symbol] = OperatorSpec(symbol, rank, kind)

    return MappingProxyType(table)


# 进程级默认操作符表，导入时初始化一次
OPERATOR_TABLE = build_operator_table()


class Operators:
    """所有操作符的静态方法集合"""

    @staticmethod
    def check_policy(division_by_zero):
        if division_by_zero is None:
            division_by_zero = EVALUATOR_CONFIG["division_by_zero"]
        if division_by_zero not in DIVISION_POLICIES:
            raise ValueError(f"Unknown division_by_zero policy: {division_by_zero!r}")
        return division_by_zero

    # 二元操作符========================================
    @staticmethod
    def pow(operand1, operand2):
        """乘方；负数的非整数次幂返回nan，溢出返回inf"""
        with np.errstate(all='ignore'):
            return np.power(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2, division_by_zero=None):
        """除法；除数为0时按策略抛出异常或返回IEEE结果"""
        division_by_zero = Operators.check_policy(division_by_zero)
        if operand2 == 0 and division_by_zero == 'raise':
            logger.debug(f"Division by zero rejected: {operand1} / {operand2}")
            raise DivisionByZero(f"Division by zero: {operand1} / {operand2}", token='/')

        with np.errstate(divide='ignore', over='ignore', invalid='ignore'):
            return np.divide(np.float64(operand1), np.float64(operand2))

    @staticmethod
    def add(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def apply(kind, operand1, operand2, division_by_zero=None):
        """
        对左右操作数应用操作符
        Args:
            kind: OperatorKind
            operand1: 左操作数
            operand2: 右操作数
            division_by_zero: 除零策略，None时取 EVALUATOR_CONFIG
        Returns:
            np.float64
        """
        if kind is OperatorKind.POW:
            return Operators.pow(operand1, operand2)
        elif kind is OperatorKind.MUL:
            return Operators.mul(operand1, operand2)
        elif kind is OperatorKind.DIV:
            return Operators.div(operand1, operand2, division_by_zero)
        elif kind is OperatorKind.ADD:
            return Operators.add(operand1, operand2)
        elif kind is OperatorKind.SUB:
            return Operators.sub(operand1, operand2)
        raise ValueError(f"Unknown operator kind: {kind!r}")

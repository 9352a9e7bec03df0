"""utils/formatting.py"""
import logging
import re

import numpy as np
import pandas as pd

from core import ExpressionError, InfixConverter

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')


def normalize_expression(expression):
    """合并连续空白并去掉首尾空白"""
    return _WHITESPACE.sub(' ', expression).strip()


def format_result(value):
    """整数值去掉小数部分，其余保留浮点表示"""
    if np.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def run_examples(examples, converter=None, evaluator=None):
    """
    对示例表达式逐个求值，出错不中断
    Args:
        examples: {'rpn': [...], 'infix': [...], 'complex_infix': [...]}
        converter: InfixConverter
        evaluator: RPNEvaluator，默认使用 converter 内部的求值器
    Returns:
        DataFrame，列为 group, notation, expression, rpn, result, error
    """
    if converter is None:
        converter = InfixConverter(evaluator=evaluator)
    if evaluator is None:
        evaluator = converter.evaluator

    rows = []
    for group, expressions in examples.items():
        notation = 'rpn' if group == 'rpn' else 'infix'
        for expression in expressions:
            expression = normalize_expression(expression)
            row = {
                'group': group,
                'notation': notation,
                'expression': expression,
                'rpn': expression if notation == 'rpn' else None,
                'result': np.nan,
                'error': None,
            }
            try:
                if notation == 'rpn':
                    row['result'] = evaluator.calculate(expression)
                else:
                    row['rpn'] = converter.to_rpn(expression)
                    row['result'] = converter.calculate(expression)
            except ExpressionError as e:
                logger.warning(f"Failed to evaluate {expression!r}: {e}")
                row['error'] = f"{e.kind}: {e}"
            rows.append(row)

    return pd.DataFrame(rows, columns=['group', 'notation', 'expression', 'rpn', 'result', 'error'])

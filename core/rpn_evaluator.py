"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from config.config import EVALUATOR_CONFIG
from core.errors import DivisionByZero, EmptyExpression, MalformedExpression, StackUnderflow, UnknownToken
from core.operators import OPERATOR_TABLE, Operators
from core.token_system import ensure_tokens

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    def __init__(self, operator_table=None, division_by_zero=None):
        self.operator_table = OPERATOR_TABLE if operator_table is None else operator_table
        if division_by_zero is None:
            division_by_zero = EVALUATOR_CONFIG["division_by_zero"]
        # 提前校验策略，避免在求值中途才失败
        self.division_by_zero = Operators.check_policy(division_by_zero)

    def calculate(self, expression):
        """
        计算RPN表达式
        Args:
            expression: 空白分隔的字符串，或Token序列
        Returns:
            float
        """
        token_sequence = ensure_tokens(expression, self.operator_table)
        return self.evaluate(token_sequence)

    def evaluate(self, token_sequence):
        """对已解析的Token序列求值"""
        if not token_sequence:
            raise EmptyExpression("Empty expression")

        stack = []
        for token in token_sequence:
            if token.is_operand:
                stack.append(token.value)
                continue

            # ================== 二元操作符处理 ==================
            if len(stack) < 2:
                logger.debug(f"Insufficient operands for {token.name}: stack={stack}")
                raise StackUnderflow(
                    f"Operator {token.name!r} needs two operands, stack has {len(stack)}",
                    token=token.name, position=token.position
                )
            operand2 = stack.pop()
            operand1 = stack.pop()

            spec = self.operator_table.get(token.name)
            if spec is None:
                raise UnknownToken(f"Unknown operator {token.name!r}", token=token.name, position=token.position)
            try:
                result = Operators.apply(spec.kind, operand1, operand2, self.division_by_zero)
            except DivisionByZero as e:
                # 补充出错位置
                e.position = token.position
                raise
            stack.append(result)

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedExpression(
                f"Expression leaves {len(stack)} values on the stack, expected 1"
            )

        return float(stack[0])

"""中缀表达式 -> RPN 转换器

单次从左到右扫描，使用两个栈：
    temp      暂存尚未确定位置的操作数/操作符，保持原始顺序
    rpn_stack 已确定的RPN输出
以及一个 tracked_op，记录最近一个挂起的操作符。

没有括号和一元操作符，所以 temp 中挂起的操作符优先级自底向上严格递增，
扫描结束时把 temp 反转接到 rpn_stack 后面即得到完整的RPN序列。
"""
import logging

from core.errors import EmptyExpression, MalformedExpression, UnknownOperator
from core.operators import OPERATOR_TABLE
from core.rpn_evaluator import RPNEvaluator
from core.token_system import RPNValidator, ensure_tokens

logger = logging.getLogger(__name__)


class InfixConverter:
    """把空白分隔的中缀表达式转换为RPN并求值"""

    def __init__(self, operator_table=None, evaluator=None):
        self.operator_table = OPERATOR_TABLE if operator_table is None else operator_table
        if evaluator is None:
            evaluator = RPNEvaluator(operator_table=self.operator_table)
        self.evaluator = evaluator

    def calculate(self, expression):
        """中缀表达式 -> RPN -> 数值"""
        rpn_expression = self.parse(expression)
        return self.evaluator.evaluate(rpn_expression)

    def to_rpn(self, expression):
        """返回空格连接的RPN字符串"""
        return ' '.join(token.name for token in self.parse(expression))

    def compare_precedence(self, tracked_op, curr_op):
        """
        挂起的 tracked_op 是否应先于 curr_op 归约
        相等时返回True，同级操作符从左到右结合
        """
        return self.operator_table[tracked_op.name].rank >= self.operator_table[curr_op.name].rank

    def parse(self, expression):
        """
        Args:
            expression: 中缀字符串、字符串序列或Token序列
        Returns:
            list[Token]: RPN顺序的Token
        """
        expression_ops = ensure_tokens(expression, self.operator_table, unknown_error=UnknownOperator)
        if not expression_ops:
            raise EmptyExpression("Empty expression")

        rpn_stack = []
        temp_stack = []
        tracked_op = None

        for op in expression_ops:
            # 所有token先进入temp
            temp_stack.append(op)

            if op.is_operand:
                continue

            if op.name not in self.operator_table:
                raise UnknownOperator(f"Unknown operator {op.name!r}", token=op.name, position=op.position)

            if tracked_op is None or not self.compare_precedence(tracked_op, op):
                # 当前操作符结合更紧（或者是第一个操作符）：
                # 把它前面的操作数移入rpn，当前操作符继续挂起
                stack_op = temp_stack.pop()
                stack_val = self._pop_operand(temp_stack, stack_op)

                rpn_stack.append(stack_val)
                temp_stack.append(stack_op)
            else:
                # 挂起的操作符结合至少一样紧：弹出3个，
                # 依次把操作数和前一个操作符放入rpn
                if len(temp_stack) < 3:
                    raise MalformedExpression(
                        f"Operator {op.name!r} has no pending operator to reduce",
                        token=op.name, position=op.position
                    )
                stack_op = temp_stack.pop()
                stack_val = self._pop_operand(temp_stack, stack_op)
                stack_op2 = temp_stack.pop()
                if not stack_op2.is_operator:
                    raise MalformedExpression(
                        f"Operand {stack_op2.name!r} is not followed by an operator",
                        token=stack_op2.name, position=stack_op2.position
                    )

                rpn_stack.append(stack_val)
                rpn_stack.append(stack_op2)

                # 更早挂起、同样需要先归约的操作符
                while temp_stack and temp_stack[-1].is_operator \
                        and self.compare_precedence(temp_stack[-1], stack_op):
                    rpn_stack.append(temp_stack.pop())

                temp_stack.append(stack_op)

            tracked_op = op
            logger.debug(f"{op.name}: temp={[t.name for t in temp_stack]} rpn={[t.name for t in rpn_stack]}")

        # temp中剩余部分反转后顺序正确
        rpn_stack.extend(reversed(temp_stack))

        if not RPNValidator.is_valid(rpn_stack):
            raise MalformedExpression(
                f"Expression does not form a valid RPN sequence: {' '.join(t.name for t in rpn_stack)}"
            )
        return rpn_stack

    @staticmethod
    def _pop_operand(temp_stack, operator):
        """弹出操作符前面的操作数，不存在时说明表达式以操作符开头或有连续操作符"""
        if not temp_stack or not temp_stack[-1].is_operand:
            raise MalformedExpression(
                f"Operator {operator.name!r} is not preceded by an operand",
                token=operator.name, position=operator.position
            )
        return temp_stack.pop()

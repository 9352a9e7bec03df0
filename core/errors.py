"""core/errors.py - 表达式错误类型，单独放置避免循环导入"""


class ExpressionError(ValueError):
    """所有表达式错误的基类，携带错误种类、出错的token和位置"""
    kind = "ExpressionError"

    def __init__(self, message, token=None, position=None):
        super().__init__(message)
        self.message = message
        self.token = token
        self.position = position

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} (token {self.token!r} at position {self.position})"


class UnknownToken(ExpressionError):
    # 既不是操作符也不是数字
    kind = "UnknownToken"


class UnknownOperator(UnknownToken):
    # 中缀转换时遇到的未知符号
    kind = "UnknownOperator"


class MalformedExpression(ExpressionError):
    kind = "MalformedExpression"


class EmptyExpression(MalformedExpression):
    kind = "EmptyExpression"


class StackUnderflow(ExpressionError):
    kind = "StackUnderflow"


class DivisionByZero(ExpressionError, ZeroDivisionError):
    kind = "DivisionByZero"

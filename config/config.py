"""配置文件"""

# 操作符参数
OPERATOR_CONFIG = {
    # 符号 -> 优先级，数值越大结合越紧
    "precedence": {
        '^': 3,
        '*': 2,
        '/': 2,
        '+': 1,
        '-': 1,
    },
}

# RPN求值器参数
EVALUATOR_CONFIG = {
    # 'raise': 除零时抛出 DivisionByZero
    # 'inf':   按IEEE-754返回 inf / -inf / nan
    "division_by_zero": "raise",
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

# 命令行驱动
DRIVER_CONFIG = {
    "exit_keyword": "exit",
    "prompt": "\nEnter an infix expression(or exit to be done): ",
    "results_path": "rpn_results.csv",
}

# 示例表达式
EXAMPLES_CONFIG = {
    "rpn": [
        "1 1 -",
        "5 3 2 * +",
        "4 8 2 * 8 + -",
        "1 1 9 * 0 + -",
        "2 3 ^",
        "1 2 120 * 63 / +",
        "1 5 3 * 2 + -",
    ],
    "infix": [
        "1 - 1",
        "5 + 3 * 2",
        "4 - 8 * 2 + 8",
        "1 - 1 * 9 + 0",
        "2 ^ 3",
        "1 + 2 * 120 / 63",
        "1 - 5 * 3 + 2",
    ],
    "complex_infix": [
        "5 ^ 2 * 10 / 2 + 2 - 1",
        "5 - 2 + 10 / 2 * 2 ^ 1",
        "5 ^ 2 * 10 / 2 + 2 - 1 + 5 - 2 + 10 / 2 * 2 ^ 1",
    ],
}

DIVISION_POLICIES = ("raise", "inf")


# 验证配置
def validate_config():
    """验证配置的合理性"""
    precedence = OPERATOR_CONFIG["precedence"]
    assert set(precedence) == {'^', '*', '/', '+', '-'}, "操作符集合是固定的"
    assert all(isinstance(rank, int) for rank in precedence.values()), "优先级必须是整数"
    assert precedence['^'] > precedence['*'] > precedence['+'], "^ 高于 * 高于 +"
    assert precedence['*'] == precedence['/'], "* 与 / 同级"
    assert precedence['+'] == precedence['-'], "+ 与 - 同级"
    assert EVALUATOR_CONFIG["division_by_zero"] in DIVISION_POLICIES, "未知的除零策略"
    return True

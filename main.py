"""主程序入口 - 中缀/RPN表达式计算"""
import argparse
import logging

from config.config import *
from core import ExpressionError, InfixConverter, RPNEvaluator
from utils import normalize_expression, format_result, run_examples

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    """设置日志"""
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG['level']).upper()),
        format=LOGGING_CONFIG['format']
    )


def evaluate_expression(expression, converter, notation='infix'):
    """
    求值并返回要输出的文本，错误也渲染为文本
    Args:
        expression: 原始输入
        converter: InfixConverter
        notation: 'infix' 或 'rpn'
    """
    expression = normalize_expression(expression)
    try:
        if notation == 'rpn':
            value = converter.evaluator.calculate(expression)
        else:
            value = converter.calculate(expression)
    except ExpressionError as e:
        logger.debug(f"{e.kind} for {expression!r}: {e}")
        return f"Error: {e}"
    return format_result(value)


def print_examples(results):
    """按组打印示例结果"""
    titles = {
        'rpn': "====== Polish ======",
        'infix': "====== Infix ======",
        'complex_infix': "====== More Complicated Infix ======",
    }
    for group, frame in results.groupby('group', sort=False):
        print(f"\n\n{titles.get(group, group)}\n")
        for row in frame.itertuples(index=False):
            if row.error:
                print(f"Expression: {row.expression} = Error: {row.error}")
            else:
                print(f"Expression: {row.expression} = {format_result(row.result)}")


def interactive_loop(converter, read=input, write=print):
    """交互循环，输入 exit 或 EOF 结束"""
    exit_keyword = DRIVER_CONFIG['exit_keyword']
    while True:
        try:
            expression = read(DRIVER_CONFIG['prompt'])
        except EOFError:
            break
        expression = expression.strip()
        if expression == exit_keyword:
            break
        if not expression:
            continue
        write(f"\nAnswer: {evaluate_expression(expression, converter)}")


def main(args):
    validate_config()
    setup_logging(args.log_level)

    evaluator = RPNEvaluator(division_by_zero=args.division_by_zero)
    converter = InfixConverter(evaluator=evaluator)
    logger.debug(f"Division by zero policy: {evaluator.division_by_zero}")

    single_shot = args.expression is not None or args.rpn is not None
    run_all = not (single_shot or args.examples or args.interactive)

    if args.expression is not None:
        print(evaluate_expression(args.expression, converter))
    if args.rpn is not None:
        print(evaluate_expression(args.rpn, converter, notation='rpn'))

    if args.examples or run_all:
        results = run_examples(EXAMPLES_CONFIG, converter=converter)
        print_examples(results)

        failed = results['error'].notna().sum()
        if failed:
            logger.warning(f"{failed} example(s) failed")

        if args.save_results:
            results_path = args.results_path or DRIVER_CONFIG['results_path']
            logger.info(f"Saving results to {results_path}")
            results.to_csv(results_path, index=False)

    if args.interactive or run_all:
        interactive_loop(converter)


def build_parser():
    parser = argparse.ArgumentParser(description="Infix to RPN calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Infix expression to evaluate, tokens separated by spaces"
    )
    parser.add_argument(
        "--rpn",
        type=str,
        default=None,
        help="RPN expression to evaluate, tokens separated by spaces"
    )
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Evaluate the built-in example expressions"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Read infix expressions from stdin until 'exit'"
    )
    parser.add_argument(
        "--division_by_zero",
        type=str,
        choices=list(DIVISION_POLICIES),
        default=EVALUATOR_CONFIG['division_by_zero'],
        help="Raise an error on division by zero, or return inf/nan"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the example results to a CSV file"
    )
    parser.add_argument(
        "--results_path",
        type=str,
        default=DRIVER_CONFIG['results_path'],
        help="Path to save the example results"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG['level'],
        help="Logging level (default: INFO)"
    )
    return parser


if __name__ == "__main__":
    main(build_parser().parse_args())

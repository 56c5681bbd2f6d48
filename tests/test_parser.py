import unittest
from rpncalc.errors import *
from rpncalc.frontend.parser import *
from rpncalc.frontend.tokenizer import tokenize
from rpncalc.frontend.utils import *

I = IntegerExpression

class TestTreeBuilding(unittest.TestCase):
    def test_leaf(self):
        self.assertEqual(parse([integer(5)]), I(5))

    def test_precedence(self):
        tree = parse(tokenize('1+9*9'))
        self.assertEqual(tree, ArithmeticExpression(OperatorKind.ADDITION, I(1),
            ArithmeticExpression(OperatorKind.MULTIPLICATION, I(9), I(9))))

    def test_operand_order(self):
        tree = parse([integer(8), integer(2), operator('-')])
        self.assertEqual(tree.left, I(8))
        self.assertEqual(tree.right, I(2))

    def test_power_nests_right(self):
        tree = parse(tokenize('2^3^2'))
        self.assertEqual(tree, ArithmeticExpression(OperatorKind.POWER, I(2),
            ArithmeticExpression(OperatorKind.POWER, I(3), I(2))))
        self.assertEqual(str(tree), '(2 ^ (3 ^ 2))')

    def test_subtraction_nests_left(self):
        self.assertEqual(str(parse(tokenize('1+1-2+10'))), '(((1 + 1) - 2) + 10)')

    def test_parentheses_are_inert(self):
        self.assertEqual(parse([LPAREN, integer(3), RPAREN]), I(3))

    def test_trailing_operands_ignored(self):
        self.assertEqual(parse(tokenize('(1)(2)')), I(2))

    def test_trailing_operands_logged(self):
        with self.assertLogs('rpncalc.frontend.parser', level='DEBUG') as logs:
            parse(tokenize('(1)(2)(3)'))
        self.assertEqual(logs.output, ['DEBUG:rpncalc.frontend.parser:Ignoring 2 trailing operand(s) left on the stack'])

class TestParserErrors(unittest.TestCase):
    def test_missing_right_operand(self):
        with self.assertRaises(MissingOperandError) as ctx:
            parse([operator('+')])
        self.assertEqual(str(ctx.exception), 'Expected operand on stack.')

    def test_missing_left_operand(self):
        self.assertRaises(MissingOperandError, parse, [integer(1), operator('*')])

    def test_empty(self):
        with self.assertRaises(EmptyExpressionError) as ctx:
            parse([])
        self.assertEqual(str(ctx.exception), 'Expected expression on stack but found none.')

    def test_only_parentheses(self):
        self.assertRaises(EmptyExpressionError, parse, tokenize('()'))

if __name__ == '__main__':
    unittest.main()

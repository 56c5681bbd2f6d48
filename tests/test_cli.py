import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock
import calc

class TestCommandLine(unittest.TestCase):
    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = calc.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_expression(self):
        self.assertEqual(self.run_main(['2*2^3^2']), (0, '1024\n', ''))

    def test_error(self):
        code, out, err = self.run_main(['1/0'])
        self.assertEqual(code, 1)
        self.assertEqual(out, '')
        self.assertIn('Error: Division by zero.', err)

    def test_skip_whitespace(self):
        self.assertEqual(self.run_main(['-w', '1 + 2'])[:2], (0, '3\n'))
        self.assertEqual(self.run_main(['1 + 2'])[0], 1)

    def test_repl(self):
        with mock.patch('builtins.input', side_effect=['1+1', '(2', '3*3', '']):
            code, out, err = self.run_main([])
        self.assertEqual(code, 0)
        self.assertEqual(out, '2\n9\n')
        self.assertIn('Missing right parenthesis', err)

    def test_repl_eof(self):
        with mock.patch('builtins.input', side_effect=EOFError):
            self.assertEqual(self.run_main([])[0], 0)

if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3

import argparse as arg
import logging
import sys
from rpncalc.calculator import evaluate
from rpncalc.config import validate_config

def run(src: str, args) -> bool:
    result = evaluate(src, args.skip_whitespace)
    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return False
    print(result.value)
    return True

def repl(args):
    try:
        while (src := input("expr: ")):
            run(src, args)
    except EOFError:
        pass

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='rpncalc',
        description='Evaluates integer arithmetic expressions',
        epilog='Version 0.1.0')

    parser.add_argument('expression', nargs='?')
    parser.add_argument('-w', '--skip-whitespace',
                        dest='skip_whitespace', action='store_true', default=False)
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    validate_config()

    if args.expression is None:
        repl(args)
        return 0

    return 0 if run(args.expression, args) else 1

if __name__ == '__main__':
    sys.exit(main())

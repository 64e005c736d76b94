import sys
import argparse

from .pairs import generate_pairs, count_pairs, validate_config
from .problems import longest_palindromic_substring, matrix_chain_order, merge_cost
from .util import get_respectful_printer, timed_op, add_tqdm, format_memo
from .window_types import WindowConfig, IndexBounds, SizeBounds, InvalidConfiguration, describe

PROBLEMS = ["pairs", "count", "palindrome", "matrix-chain", "merge"]

_KEYS = [
# configuration
    ('-f', '--from', int, dict(dest = "index_from")),
    ('-t', '--to', int, dict(dest = "index_to")),
    ('-m', '--min', int, dict(dest = "size_min")),
    ('-M', '--max', int, dict(dest = "size_max")),
# problem
    ('-P', '--problem', str, dict(choices = PROBLEMS, default = "pairs")),
    ('-i', '--input', str, dict()),
# output
    ('-o', '--output', argparse.FileType('w'), dict()),
    ('-V', '--verbosity', int, dict(default = 0)),
]

def _build_parser(prog: str, description: str, epilog: str, keys: list):
    parser = argparse.ArgumentParser(
        prog = prog,
        description = description,
        epilog = epilog)
    for x in keys:
        parser.add_argument(
            x[0], x[1],
            type = x[2],
            **x[3]
        )
    return parser

_DEFAULT_PARSER = _build_parser(
    "windowpairs",
    "enumerate interval windows and evaluate interval dynamic programs over them.",
    "`pairs` and `count` read the window configuration from --from, --to, --min and --max; the other problems span their whole --input.",
    _KEYS)

def _split_ints(text: str) -> list[int]:
    return [int(x) for x in text.split(',') if x.strip() != '']

def _solve(args, printer):
    "Runs the selected problem; returns its answer and memo."
    if args.problem == "palindrome":
        s = args.input
        if len(s) < 2:
            return s, None
        memo = timed_op(printer, "finding palindromes...", longest_palindromic_substring, s)
        return memo[0][len(s) - 1].longest or s[0], memo
    elif args.problem == "matrix-chain":
        dimensions = _split_ints(args.input)
        memo = timed_op(printer, "ordering matrix chain...", matrix_chain_order, dimensions)
        return memo[0][len(dimensions) - 2], memo
    else:
        piles = _split_ints(args.input)
        memo = timed_op(printer, "merging piles...", merge_cost, piles)
        return memo[0][len(piles) - 1], memo

def main(argv = None):
    args = _DEFAULT_PARSER.parse_args(argv)
    out = args.output or sys.stdout
    printer = get_respectful_printer(args, file = out)

    if args.problem in ("pairs", "count"):
        try:
            config = validate_config(WindowConfig(
                index = IndexBounds(to = args.index_to, from_ = args.index_from),
                size = SizeBounds(min = args.size_min, max = args.size_max)))
        except InvalidConfiguration as e:
            _DEFAULT_PARSER.error(str(e))
        if args.problem == "count":
            print(count_pairs(config), file = out)
        else:
            printer(f"config: {config.as_dict()}", 1)
            payloads = generate_pairs(config)
            if args.verbosity >= 2:
                payloads = add_tqdm(payloads, total = count_pairs(config), description = "pairs")
            for payload in payloads:
                print(describe(payload), file = out)
    else:
        if args.input is None:
            _DEFAULT_PARSER.error(f"--input is required for problem `{args.problem}`.")
        try:
            answer, memo = _solve(args, printer)
        except ValueError as e:
            _DEFAULT_PARSER.error(str(e))
        if memo is not None:
            printer(format_memo(memo), 2)
        print(answer, file = out)
    return 0

if __name__ == "__main__":
    sys.exit(main())

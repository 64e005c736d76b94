from time import time

from tabulate import tabulate
from tqdm import tqdm

from .memo import WindowMemo

#=============================================================================#
# reporting

def get_respectful_printer(args, file = None):
    def print_respectfully(msg, verbosity_level, arg_verbosity = args.verbosity):
        if (arg_verbosity or 0) >= verbosity_level:
            print(msg, file = file)
    return print_respectfully

def timed_op(printer, msg, op, *args, **kwargs):
    "Runs `op(*args, **kwargs)`, reporting `msg` and the elapsed time at verbosity 1."
    printer(msg, 1)
    time_start = time()
    out = op(*args, **kwargs)
    printer(f"\tduration: {time() - time_start}", 1)
    return out

def add_tqdm(inputs, total=None, description=None):
    """Wraps an iterator with a tqdm progress bar.

    :inputs: an iterator.
    :total: the length of the iterator; optional.
    :description: passed to the `desc` field of the tqdm object."""
    return tqdm(inputs, total=total, leave=False, desc=description)

def format_memo(memo: WindowMemo, value_format = str) -> str:
    """Renders a memo as a table: one row per memo row, one column per column index.
    Cells that were never written are left blank."""
    columns = sorted({j for (_, j) in memo})
    table = []
    for i in sorted(memo.rows()):
        row = memo[i]
        table.append([i] + [value_format(row[j]) if j in row else '' for j in columns])
    return tabulate(table, headers = [''] + columns)

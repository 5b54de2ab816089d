import argparse
import sys

from _dfascan.exceptions import TableBuildError
from _dfascan.reading import read_table
from _dfascan.scanner import scan
from _dfascan.writing import format_table, write_trace


class ArgumentParser(argparse.ArgumentParser):
    """
    An argparse.ArgumentParser which exits with status 1 on usage errors.
    """

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def make_argument_parser():
    parser = ArgumentParser(
        prog="dfascan",
        description="Scan stdin with the automaton of a transition matrix file",
    )
    parser.add_argument("tmfile", help="Path to the transition matrix file")
    return parser


def main(argv=None):
    args = make_argument_parser().parse_args(argv)

    try:
        table = read_table(args.tmfile)
    except OSError as err:
        print(f"{args.tmfile}: {err.strerror or err}", file=sys.stderr)
        return 1
    except TableBuildError as err:
        print(f"{args.tmfile}: {err}", file=sys.stderr)
        return 1

    # Every byte of stdin is one symbol, and shifted bytes are written back
    # unchanged.
    sys.stdout.reconfigure(encoding="latin-1")
    sys.stdout.write(format_table(table))
    write_trace(sys.stdout, scan(table, sys.stdin.buffer))
    return 0

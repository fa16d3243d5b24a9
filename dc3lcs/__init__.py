#!/usr/bin/env python3

import sys
import warnings

import click
from tqdm import tqdm

from .encoding import AlphabetError, LCSError, SeparatorError
from .stringalg import lcs_length

# what gets stripped from the end of inputs and lines
NEWLINES = "\r\n"


def read_input(path, binary):
    """Whole content of a file, - being stdin"""
    if binary:
        with click.open_file(path, "rb") as f:
            return f.read()
    with click.open_file(path, "r", encoding="utf-8") as f:
        return f.read()


def strip_newlines(data, keep_newlines):
    if keep_newlines:
        return data
    if isinstance(data, bytes):
        return data.rstrip(NEWLINES.encode())
    return data.rstrip(NEWLINES)


def line_pairs(a, b, keep_newlines):
    """Lines of a and b paired by index, extra lines are dropped"""
    lines_a = a.splitlines(keepends=keep_newlines)
    lines_b = b.splitlines(keepends=keep_newlines)
    if len(lines_a) != len(lines_b):
        warnings.warn(
            f"inputs have {len(lines_a)} and {len(lines_b)} lines, "
            "extra lines are ignored"
        )
    return list(zip(lines_a, lines_b))


@click.command()
@click.argument("first")
@click.argument("second")
@click.option("--literal", is_flag=True, help="FIRST and SECOND are the inputs, not files.")
@click.option("--binary", is_flag=True, help="Compare bytes instead of characters.")
@click.option("--lines", is_flag=True, help="Compare the inputs line by line.")
@click.option("--keep-newlines", is_flag=True)
@click.option("--separator", default=None, help="Character reserved as separator.")
def main(first, second, literal, binary, lines, keep_newlines, separator):
    """Length of the longest common substring of FIRST and SECOND."""
    if binary and separator is not None:
        raise click.UsageError("--separator only applies to text inputs")

    if literal:
        a, b = first, second
        if binary:
            a, b = a.encode("utf-8"), b.encode("utf-8")
    else:
        a, b = read_input(first, binary), read_input(second, binary)

    try:
        if lines:
            pairs = line_pairs(a, b, keep_newlines)
            print(f"Comparing {len(pairs)} line pairs.", file=sys.stderr)
            for x, y in tqdm(pairs, disable=None):
                click.echo(lcs_length(x, y, separator))
        else:
            a = strip_newlines(a, keep_newlines)
            b = strip_newlines(b, keep_newlines)
            click.echo(lcs_length(a, b, separator))
    except LCSError as e:
        raise click.ClickException(str(e)) from e

#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Interactive front end: read matrices and print what can be derived from them"""

from argparse import ArgumentParser, FileType, RawDescriptionHelpFormatter
import logging
import sys
from typing import Iterator, TextIO

from .cofactor import adjoint, adjoint_determinant, determinant
from .matrix import DenseMatrix, DimensionError
from .rref import reduce_to_rref

LOG = logging.getLogger(__name__)

BANNER = (
    "\nThis calculates the reduced row echelon form, determinant, adjoint, and other useful things of an m x n matrix.\n\n"
    "Note: the inverse of the matrix is just adjA/detA, both of which are provided. Alternatively, the inverse can be "
    "found by inputting the original matrix augmented with the identity matrix of the same size\n\n"
    "Enter Ctrl+C (or end the input) at any time to exit the program.\n")


def tokenize(stream: TextIO) -> Iterator[str]:
    """Yield whitespace separated tokens, reading the stream line by line"""
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended before the matrix was complete") from None


def read_matrix(tokens: Iterator[str], out: TextIO = sys.stdout) -> DenseMatrix:
    """
    Prompt for and read one matrix.

    The row count, the column count and then rows x cols values are taken from the
    token iterator in row-major order.

    Args:
        tokens: Source of input tokens, see tokenize()
        out: Stream the prompts are written to

    Returns:
        The matrix read

    Raises:
        EOFError: If the tokens run out
        ValueError: If a token is not a number of the expected kind
        DimensionError: If the row or column count is not positive
    """
    print("Enter the number of rows (m): ", file=out)
    rows = int(_next_token(tokens))
    print("Enter the number of columns (n): ", file=out)
    cols = int(_next_token(tokens))
    if rows < 1 or cols < 1:
        raise DimensionError(f"matrix dimensions must be positive, got {rows}x{cols}")
    grid = []
    for row in range(rows):
        print(f"Enter row {row + 1} (separate entries with a space or new line): ", file=out)
        grid.append([float(_next_token(tokens)) for _ in range(cols)])
    return DenseMatrix(rows, cols, grid)


def describe(matrix: DenseMatrix) -> str:
    """Report on the input matrix, its determinant, transpose, RREF and adjoint"""
    det = determinant(matrix)
    report = [f"\nThe input matrix is:\n\n{matrix}\n"]
    if det is not None:
        report.append(f"The determinant of this matrix is: {det}\n")
        if det == 0.0:
            report.append("This matrix is singular - it is not invertible.\n")
        elif matrix.is_identity():
            report.append(f"This matrix is the identity matrix I of size {matrix.rows}.\n")
    else:
        report.append("This matrix does not have a determinant - it needs to be square.\n")
    report.append(f"\nThe transpose of this matrix is:\n\n{matrix.transpose()}\n")
    report.append(f"The reduced row echelon form of this matrix is:\n\n{reduce_to_rref(matrix)}\n")
    adj = adjoint(matrix)
    if adj is not None:
        report.append(f"The adjoint of this matrix is: \n\n{adj}\n")
        report.append(f"The determinant of the adjoint matrix is: {adjoint_determinant(matrix)}\n")
    return '\n'.join(report)


def main(stream_in: TextIO = sys.stdin, out: TextIO = sys.stdout, once: bool = False) -> int:
    """
    Read matrices until the input ends and print a report for each.

    Invalid input is reported and the prompts start over with the next token.

    Args:
        stream_in: Input stream
        out: Output stream
        once: Stop after the first matrix that was read successfully

    Returns:
        Number of matrices reported on
    """
    print(BANNER, file=out)
    tokens = tokenize(stream_in)
    count = 0
    while True:
        try:
            matrix = read_matrix(tokens, out)
        except EOFError:
            LOG.debug("End of input reached.")
            break
        except ValueError as err:
            LOG.debug(f"Rejected input: {err}")
            print(f"Invalid input: {err}\n", file=out)
            continue
        print(describe(matrix), file=out)
        count += 1
        if once:
            break
    return count


def start_from_command_line():
    """
    Entry point of the jmat command. Parses the command line, sets up logging and
    runs main().
    """
    usage = '''usage: jmat [-i <matrices>.txt] [--once] [--verbose]'''
    parser = ArgumentParser(prog='jmat',
                            description='Compute the reduced row echelon form, determinant, transpose\n'
                            'and adjoint of real matrices entered on the console or read from a file',
                            epilog=usage,
                            formatter_class=RawDescriptionHelpFormatter)
    parser.add_argument("-i", "--input", type=FileType('r'), default=sys.stdin,
                        help="text file with row count, column count and entries of one or more matrices")
    parser.add_argument("--once", action='store_true', help="stop after the first matrix")
    parser.add_argument("-v", "--verbose", action='store_true', help="print debug messages")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format='%(levelname)s: %(message)s')
    try:
        main(args.input, sys.stdout, once=args.once)
    except KeyboardInterrupt:
        print(file=sys.stdout)
        sys.exit(130)
    finally:
        if args.input is not sys.stdin:
            args.input.close()

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
"""jmat: reduced row echelon form, determinants, cofactors and adjoints of real matrices"""

from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .matrix import DenseMatrix, DimensionError
from .rref import RowReduction, is_reduced, is_reduced_column, reduce_to_rref
from .cofactor import adjoint, adjoint_determinant, cofactor_at, cofactor_matrix, determinant, dot
from .printing import format_entry, matrix_to_str

__all__ = [
    'EPSILON',
    'DISPLAY_DIGITS',
    'CELL_WIDTH',
    'ROW_INDENT',
    'DisableLogger',
    'DenseMatrix',
    'DimensionError',
    'RowReduction',
    'is_reduced',
    'is_reduced_column',
    'reduce_to_rref',
    'adjoint',
    'adjoint_determinant',
    'cofactor_at',
    'cofactor_matrix',
    'determinant',
    'dot',
    'format_entry',
    'matrix_to_str',
]

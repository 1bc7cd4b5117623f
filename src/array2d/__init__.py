# Copyright (c) 2020-2023, Andrea Zoppi.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice,
#    this list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright
#    notice, this list of conditions and the following disclaimer in the
#    documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

r"""Dense two-dimensional arrays over flat buffers.

A :obj:`Grid` stores ``height * width`` items into a single linear buffer
(a :obj:`list` by default, or any mutable sequence supporting slice
assignment, like :obj:`bytearray`, :obj:`array.array` or a one-dimensional
``numpy`` array), arranged either in *row-major* or in *column-major* order:

+-------------+---+---+---+---+---+---+
| offset      | 0 | 1 | 2 | 3 | 4 | 5 |
+=============+===+===+===+===+===+===+
| row-major   |0,0|0,1|0,2|1,0|1,1|1,2|
+-------------+---+---+---+---+---+---+
| column-major|0,0|1,0|0,1|1,1|0,2|1,2|
+-------------+---+---+---+---+---+---+

The table above shows the ``(row, col)`` coordinates stored at each buffer
offset of a grid with 2 rows and 3 columns.

>>> from array2d import Grid, Layout
>>> grid = Grid.from_jagged(2, 3, [[1, 2, 3], [4, 5, 6]])
>>> grid.buffer
[1, 2, 3, 4, 5, 6]
>>> grid = Grid.from_jagged(2, 3, [[1, 2, 3], [4, 5, 6]], layout=Layout.COLUMN_MAJOR)
>>> grid.buffer
[1, 4, 2, 5, 3, 6]

Lines stored contiguously are returned as :obj:`GridView` objects, which
alias the buffer; the other lines are copied into new lists:

>>> grid.col(1)
GridView([2, 5])
>>> grid.row(1)
[4, 5, 6]

Grids are meant for single-threaded use: views share the buffer of their
grid, and no locking is performed. Use :meth:`Grid.copy` or :meth:`Grid.map`
to get independent storage.
"""

__version__ = '0.1.0'

from .base import *  # noqa: F401, F403
from .py import *  # noqa: F401, F403

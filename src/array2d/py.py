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

r"""Pure Python implementation.

Every item access goes through a single address translation, chosen by the
grid layout; lines aligned with the layout are aliased via :class:`GridView`,
the other ones are copied.
"""

import abc
import collections.abc
import operator
from typing import Any
from typing import Callable
from typing import Iterator
from typing import List
from typing import MutableSequence
from typing import Optional
from typing import Tuple
from typing import Type
from typing import TypeVar
from typing import Union

from .base import EDGE_ITEMS
from .base import PRINT_THRESHOLD
from .base import BaseCursor
from .base import BaseGrid
from .base import BaseGridView
from .base import Buffer
from .base import Coordinate
from .base import GridError
from .base import InvalidDestinationError
from .base import JaggedRows
from .base import Layout
from .base import Line
from .base import Mapped
from .base import OutOfBoundsError
from .base import ShapeMismatchError
from .base import Value

try:
    from typing import Self
except ImportError:  # pragma: no cover  # Python < 3.11
    Self = None  # dummy
    _GridSelf = TypeVar('_GridSelf', bound='Grid')
else:  # pragma: no cover
    _GridSelf = Self

__all__ = [
    'ColCursor',
    'Grid',
    'GridView',
    'RowCursor',
]


def fill_span(
    buffer: Buffer,
    start: int,
    endex: int,
    value: Any,
) -> None:
    r"""Fills a contiguous span of a buffer with the same value.

    Only the first item is written directly; the filled prefix is then
    copied over the following items, doubling at each step.

    Arguments:
        buffer (mutable sequence):
            Target buffer, supporting slice assignment.

        start (int):
            Inclusive start offset.

        endex (int):
            Exclusive end offset.

        value:
            Fill value.
    """

    size = endex - start
    if size <= 0:
        return

    buffer[start] = value
    filled = 1

    while filled < size:
        chunk = min(filled, size - filled)
        offset = start + filled
        buffer[offset:offset + chunk] = buffer[start:start + chunk]
        filled += chunk


def _summarize(
    size: int,
) -> List[Optional[int]]:
    # None marks the elided middle
    if size > PRINT_THRESHOLD:
        return [*range(EDGE_ITEMS), None, *range(size - EDGE_ITEMS, size)]
    return list(range(size))


class GridView(BaseGridView):
    __doc__ = BaseGridView.__doc__

    __hash__ = None

    def __delitem__(
        self,
        key: Any,
    ) -> None:

        raise TypeError('cannot delete view items')

    def __eq__(
        self,
        other: Any,
    ) -> bool:

        if isinstance(other, (str, bytes, bytearray)):
            return NotImplemented
        if not isinstance(other, collections.abc.Sequence):
            return NotImplemented
        if len(other) != self._size:
            return False
        return all(a == b for a, b in zip(self, other))

    def __getitem__(
        self,
        key: Union[int, slice],
    ) -> Any:

        buffer = self._buffer
        if isinstance(key, slice):
            start = self._start
            return [buffer[start + i] for i in range(*key.indices(self._size))]
        return buffer[self._rectify_index(key)]

    def __init__(
        self,
        wrapped: Buffer,
        start: int = 0,
        size: Optional[int] = None,
    ):

        start = operator.index(start)
        if size is None:
            size = len(wrapped) - start
        size = operator.index(size)

        if start < 0 or size < 0 or start + size > len(wrapped):
            raise ValueError('view span out of buffer bounds')

        self._buffer: Buffer = wrapped
        self._start: int = start
        self._size: int = size

    def __iter__(
        self,
    ) -> Iterator[Any]:

        buffer = self._buffer
        for offset in range(self._start, self._start + self._size):
            yield buffer[offset]

    def __len__(
        self,
    ) -> int:

        return self._size

    def __repr__(
        self,
    ) -> str:

        return f'{type(self).__name__}({self.tolist()!r})'

    def __setitem__(
        self,
        key: Union[int, slice],
        value: Any,
    ) -> None:

        buffer = self._buffer
        if isinstance(key, slice):
            indices = range(*key.indices(self._size))
            values = list(value)
            if len(values) != len(indices):
                raise ValueError('view cannot be resized')
            start = self._start
            for index, item in zip(indices, values):
                buffer[start + index] = item
        else:
            buffer[self._rectify_index(key)] = value

    def _rectify_index(
        self,
        index: int,
    ) -> int:

        index = operator.index(index)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError('view index out of range')
        return self._start + index

    def fill(
        self,
        value: Any,
    ) -> None:

        fill_span(self._buffer, self._start, self._start + self._size, value)

    @property
    def obj(
        self,
    ) -> Buffer:

        return self._buffer

    @property
    def start(
        self,
    ) -> int:

        return self._start

    def tolist(
        self,
    ) -> List[Any]:

        return list(self)


class _LineCursor(BaseCursor):

    _DIMENSION: str = ''

    def __init__(
        self,
        grid: 'Grid',
        count: int,
        length: int,
    ):

        self._grid: Grid = grid
        self._count: int = count
        self._length: int = length
        self._index: int = -1
        self._error: Optional[GridError] = None

    def __iter__(
        self,
    ) -> Iterator[int]:

        while self.next():
            yield self._index

    @abc.abstractmethod
    def _line(
        self,
        index: int,
    ) -> Line:
        ...

    @property
    def error(
        self,
    ) -> Optional[GridError]:

        return self._error

    @property
    def index(
        self,
    ) -> int:

        return self._index

    def next(
        self,
    ) -> bool:

        if self._error is not None:
            return False
        if self._index + 1 >= self._count:
            return False
        self._index += 1
        return True

    def scan(
        self,
        dest: Optional[MutableSequence],
    ) -> None:

        if self._error is not None:
            raise self._error

        if dest is None:
            self._error = InvalidDestinationError(None, self._length, self._DIMENSION)
            raise self._error

        if len(dest) != self._length:
            self._error = InvalidDestinationError(len(dest), self._length, self._DIMENSION)
            raise self._error

        try:
            line = self._line(self._index)
        except OutOfBoundsError as error:
            self._error = error
            raise

        for offset, value in enumerate(line):
            dest[offset] = value


class RowCursor(_LineCursor):
    __doc__ = BaseCursor.__doc__

    _DIMENSION = 'width'

    def __init__(
        self,
        grid: 'Grid',
    ):

        super().__init__(grid, grid.height, grid.width)

    def _line(
        self,
        index: int,
    ) -> Line:

        return self._grid.row(index)


class ColCursor(_LineCursor):
    __doc__ = BaseCursor.__doc__

    _DIMENSION = 'height'

    def __init__(
        self,
        grid: 'Grid',
    ):

        super().__init__(grid, grid.width, grid.height)

    def _line(
        self,
        index: int,
    ) -> Line:

        return self._grid.col(index)


class Grid(BaseGrid[Value]):
    __doc__ = BaseGrid.__doc__

    __hash__ = None

    def __copy__(
        self: _GridSelf,
    ) -> _GridSelf:

        return self.copy()

    def __deepcopy__(
        self: _GridSelf,
        memo: Optional[dict] = None,
    ) -> _GridSelf:

        return self.copy()

    def __eq__(
        self,
        other: Any,
    ) -> bool:

        if not isinstance(other, BaseGrid):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(a == b for a, b in zip(self.values(), other.values()))

    def __getitem__(
        self,
        key: Tuple[Coordinate, Coordinate],
    ) -> Value:

        row, col = key
        return self.get(row, col)

    def __init__(
        self,
        height: int = 0,
        width: int = 0,
        zero: Any = 0,
        *,
        layout: Layout = Layout.ROW_MAJOR,
    ):

        self._setup(height, width, None, layout)
        self._buffer = [zero] * self.size

    def __iter__(
        self,
    ) -> Iterator[Value]:

        yield from self.values()

    def __repr__(
        self,
    ) -> str:

        types = {type(value) for value in self._buffer}
        type_name = types.pop().__name__ if len(types) == 1 else 'object'
        return f'{type(self).__name__}[{type_name}] {self._height}x{self._width} {self}'

    def __setitem__(
        self,
        key: Tuple[Coordinate, Coordinate],
        value: Value,
    ) -> None:

        row, col = key
        self.set(row, col, value)

    def __str__(
        self,
    ) -> str:

        if not self._height or not self._width:
            return '[]'

        buffer = self._buffer
        offset_of = self._offset
        col_indices = _summarize(self._width)
        tokens = []

        for row in _summarize(self._height):
            if row is None:
                tokens.append('...')
                continue

            items = ['...' if col is None else str(buffer[offset_of(row, col)])
                     for col in col_indices]
            tokens.append('[' + ' '.join(items) + ']')

        return '[' + ' '.join(tokens) + ']'

    def _check_col(
        self,
        col: Coordinate,
        name: str = 'col',
    ) -> int:

        col = operator.index(col)
        if not 0 <= col < self._width:
            raise OutOfBoundsError(name, col, self._width)
        return col

    def _check_row(
        self,
        row: Coordinate,
        name: str = 'row',
    ) -> int:

        row = operator.index(row)
        if not 0 <= row < self._height:
            raise OutOfBoundsError(name, row, self._height)
        return row

    def _contiguous_line(
        self,
        index: int,
    ) -> GridView:

        # Rows for row-major, columns for column-major
        length = self._height if self._col_major else self._width
        return GridView(self._buffer, index * length, length)

    def _offset(
        self,
        row: int,
        col: int,
    ) -> int:

        # Unchecked: callers validate coordinates first
        if self._col_major:
            return row + col * self._height
        return col + row * self._width

    def _setup(
        self,
        height: int,
        width: int,
        buffer: Optional[Buffer],
        layout: Layout,
    ) -> None:

        height = operator.index(height)
        width = operator.index(width)
        if height < 0:
            raise ShapeMismatchError(f'negative height {height}', height, 0)
        if width < 0:
            raise ShapeMismatchError(f'negative width {width}', width, 0)

        layout = Layout(layout)
        self._height: int = height
        self._width: int = width
        self._layout: Layout = layout
        self._col_major: bool = layout is Layout.COLUMN_MAJOR
        self._buffer: Buffer = buffer

    def _strided_line(
        self,
        index: int,
    ) -> List[Value]:

        # Columns for row-major, rows for column-major
        stride = self._height if self._col_major else self._width
        return list(self._buffer[index::stride])

    @classmethod
    def _wrap_buffer(
        cls: Type[_GridSelf],
        height: int,
        width: int,
        buffer: Buffer,
        layout: Layout,
    ) -> _GridSelf:

        grid = cls.__new__(cls)
        grid._setup(height, width, buffer, layout)
        return grid

    @property
    def buffer(
        self,
    ) -> Buffer:

        return self._buffer

    @property
    def c_contiguous(
        self,
    ) -> bool:

        return not self._col_major

    def col(
        self,
        col: Coordinate,
    ) -> Line:

        col = self._check_col(col)
        if self._col_major:
            return self._contiguous_line(col)
        return self._strided_line(col)

    def cols(
        self,
    ) -> ColCursor:

        return ColCursor(self)

    def copy(
        self: _GridSelf,
    ) -> _GridSelf:

        return self._wrap_buffer(self._height, self._width, list(self._buffer), self._layout)

    @property
    def f_contiguous(
        self,
    ) -> bool:

        return self._col_major

    def fill(
        self,
        row1: Coordinate,
        col1: Coordinate,
        row2: Coordinate,
        col2: Coordinate,
        value: Value,
    ) -> None:

        col1 = self._check_col(col1, 'col1')
        row1 = self._check_row(row1, 'row1')
        col2 = self._check_col(col2, 'col2')
        row2 = self._check_row(row2, 'row2')

        if col2 < col1:
            col1, col2 = col2, col1
        if row2 < row1:
            row1, row2 = row2, row1

        # Fill the first contiguous span, then replicate it along the region
        if self._col_major:
            major1, major2, minor1, minor2 = col1, col2, row1, row2
            stride = self._height
        else:
            major1, major2, minor1, minor2 = row1, row2, col1, col2
            stride = self._width

        buffer = self._buffer
        start = minor1 + major1 * stride
        endex = minor2 + 1 + major1 * stride
        fill_span(buffer, start, endex, value)

        for major in range(major1 + 1, major2 + 1):
            delta = (major - major1) * stride
            buffer[start + delta:endex + delta] = buffer[start:endex]

    @classmethod
    def filled(
        cls: Type[_GridSelf],
        height: int,
        width: int,
        value: Value,
        layout: Layout = Layout.ROW_MAJOR,
    ) -> _GridSelf:

        grid = cls._wrap_buffer(height, width, None, layout)
        grid._buffer = [None] * grid.size
        fill_span(grid._buffer, 0, grid.size, value)
        return grid

    @classmethod
    def from_buffer(
        cls: Type[_GridSelf],
        height: int,
        width: int,
        buffer: Buffer,
        layout: Layout = Layout.ROW_MAJOR,
    ) -> _GridSelf:

        expected = operator.index(height) * operator.index(width)
        if len(buffer) != expected:
            raise ShapeMismatchError(f'buffer length {len(buffer)} does not match height*width {expected}',
                                     len(buffer), expected)

        return cls._wrap_buffer(height, width, buffer, layout)

    @classmethod
    def from_jagged(
        cls: Type[_GridSelf],
        height: int,
        width: int,
        rows: JaggedRows,
        zero: Any = 0,
        layout: Layout = Layout.ROW_MAJOR,
    ) -> _GridSelf:

        if len(rows) > height:
            raise ShapeMismatchError(f'jagged height {len(rows)} exceeds specified height {height}',
                                     len(rows), height)

        grid = cls(height, width, zero, layout=layout)

        for row, items in enumerate(rows):
            if len(items) > width:
                raise ShapeMismatchError(f'row {row} width {len(items)} exceeds specified width {width}',
                                         len(items), width, row=row)

            if grid._col_major:
                for col, value in enumerate(items):
                    grid._buffer[grid._offset(row, col)] = value
            else:
                grid._contiguous_line(row)[:len(items)] = items

        return grid

    def get(
        self,
        row: Coordinate,
        col: Coordinate,
    ) -> Value:

        col = self._check_col(col)
        row = self._check_row(row)
        return self._buffer[self._offset(row, col)]

    @property
    def height(
        self,
    ) -> int:

        return self._height

    def items(
        self,
    ) -> Iterator[Tuple[Coordinate, Coordinate, Value]]:

        buffer = self._buffer
        offset_of = self._offset
        width = self._width

        for row in range(self._height):
            for col in range(width):
                yield row, col, buffer[offset_of(row, col)]

    def iter_col(
        self,
        col: Coordinate,
    ) -> Iterator[Tuple[Coordinate, Value]]:

        col = self._check_col(col)
        buffer = self._buffer
        offset_of = self._offset
        return ((row, buffer[offset_of(row, col)]) for row in range(self._height))

    def iter_row(
        self,
        row: Coordinate,
    ) -> Iterator[Tuple[Coordinate, Value]]:

        row = self._check_row(row)
        buffer = self._buffer
        offset_of = self._offset
        return ((col, buffer[offset_of(row, col)]) for col in range(self._width))

    @property
    def layout(
        self,
    ) -> Layout:

        return self._layout

    def map(
        self,
        transform: Callable[[Value], Mapped],
    ) -> 'Grid[Mapped]':

        buffer = [None] * self.size
        offset_of = self._offset

        for row, col, value in self.items():
            buffer[offset_of(row, col)] = transform(value)

        return self._wrap_buffer(self._height, self._width, buffer, self._layout)

    def row(
        self,
        row: Coordinate,
    ) -> Line:

        row = self._check_row(row)
        if self._col_major:
            return self._strided_line(row)
        return self._contiguous_line(row)

    def row_span(
        self,
        row: Coordinate,
        col1: Coordinate,
        col2: Coordinate,
    ) -> Line:

        row = self._check_row(row)
        col1 = self._check_col(col1, 'col1')
        col2 = self._check_col(col2, 'col2')
        if col2 < col1:
            col1, col2 = col2, col1

        start = self._offset(row, col1)
        if self._col_major:
            return list(self._buffer[start:self._offset(row, col2) + 1:self._height])
        return GridView(self._buffer, start, col2 + 1 - col1)

    def rows(
        self,
    ) -> RowCursor:

        return RowCursor(self)

    def set(
        self,
        row: Coordinate,
        col: Coordinate,
        value: Value,
    ) -> None:

        col = self._check_col(col)
        row = self._check_row(row)
        self._buffer[self._offset(row, col)] = value

    @property
    def strides(
        self,
    ) -> Tuple[int, int]:

        if self._col_major:
            return 1, self._height
        return self._width, 1

    def to_slices(
        self,
    ) -> List[Line]:

        return [self.row(row) for row in range(self._height)]

    def to_slices_by_col(
        self,
    ) -> List[Line]:

        return [self.col(col) for col in range(self._width)]

    def tolist(
        self,
    ) -> List[List[Value]]:

        return [list(line) for line in self.to_slices()]

    def values(
        self,
    ) -> Iterator[Value]:

        for _, _, value in self.items():
            yield value

    @property
    def width(
        self,
    ) -> int:

        return self._width

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

r"""Common stuff, shared across modules."""

import abc
import collections.abc
import enum
from typing import Any
from typing import Callable
from typing import Generic
from typing import Iterator
from typing import List
from typing import MutableSequence
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import TypeVar
from typing import Union

try:
    from typing import TypeAlias
except ImportError:  # pragma: no cover
    TypeAlias = Any  # Python < 3.10

__all__ = [
    'EDGE_ITEMS',
    'PRINT_THRESHOLD',
    'BaseCursor',
    'BaseGrid',
    'BaseGridView',
    'GridError',
    'InvalidDestinationError',
    'Layout',
    'OutOfBoundsError',
    'ShapeMismatchError',
]

Value = TypeVar('Value')
Mapped = TypeVar('Mapped')

Buffer: TypeAlias = MutableSequence
Coordinate: TypeAlias = int
Shape: TypeAlias = Tuple[int, int]
Line: TypeAlias = Union['BaseGridView', List[Any]]
JaggedRows: TypeAlias = Sequence[Sequence[Any]]

PRINT_THRESHOLD: int = 10
r"""Grid height or width above which printing is summarized."""

EDGE_ITEMS: int = 5
r"""Number of rows or columns printed at each edge of a summarized grid."""


class Layout(enum.Enum):
    r"""Backing storage layout of a grid.

    With :attr:`ROW_MAJOR` each row occupies a contiguous run of the buffer,
    and columns are strided by the grid width.

    With :attr:`COLUMN_MAJOR` each column occupies a contiguous run of the
    buffer, and rows are strided by the grid height.

    Examples:
        >>> from array2d import Layout
        >>> Layout('column-major')
        <Layout.COLUMN_MAJOR: 'column-major'>
    """

    ROW_MAJOR = 'row-major'
    COLUMN_MAJOR = 'column-major'


class GridError(Exception):
    r"""Base class of all the errors raised by this package."""


class ShapeMismatchError(GridError, ValueError):
    r"""Source data does not fit the declared grid shape.

    Arguments:
        message (str):
            Error description.

        actual (int):
            Offending value (buffer length, row count, row length, ...).

        expected (int):
            Expected value, or bound exceeded by `actual`.

        row (int):
            Offending row index of a jagged source, if any.
    """

    def __init__(
        self,
        message: str,
        actual: int,
        expected: int,
        row: Optional[int] = None,
    ):

        super().__init__(message)
        self.actual: int = actual
        self.expected: int = expected
        self.row: Optional[int] = row


class OutOfBoundsError(GridError, IndexError):
    r"""Coordinate outside of the grid.

    The valid range of the failing coordinate is ``[0, bound)``.

    Arguments:
        name (str):
            Name of the failing coordinate, *e.g.* ``'row'``, ``'col2'``.

        index (int):
            Offending coordinate value.

        bound (int):
            Exclusive upper bound of the coordinate, *i.e.* the grid height
            for rows, or the grid width for columns.

    Examples:
        >>> from array2d import OutOfBoundsError
        >>> str(OutOfBoundsError('col1', 7, 3))
        'col1 index 7 out of range for width 3'
    """

    def __init__(
        self,
        name: str,
        index: int,
        bound: int,
    ):

        dimension = 'width' if name.startswith('col') else 'height'
        super().__init__(f'{name} index {index} out of range for {dimension} {bound}')
        self.name: str = name
        self.index: int = index
        self.bound: int = bound


class InvalidDestinationError(GridError, ValueError):
    r"""Destination of a cursor scan is missing or has the wrong length.

    Arguments:
        actual (int):
            Length of the destination, ``None`` if missing.

        expected (int):
            Required length.

        dimension (str):
            Grid dimension matching the required length.
    """

    def __init__(
        self,
        actual: Optional[int],
        expected: int,
        dimension: str,
    ):

        if actual is None:
            message = 'destination for scan cannot be None'
        else:
            message = (f'destination has length {actual}, '
                       f'but grid {dimension} is {expected}')
        super().__init__(message)
        self.actual: Optional[int] = actual
        self.expected: int = expected


class BaseGridView(collections.abc.Sequence):
    r"""Fixed-size view over a contiguous run of a buffer.

    Any changes made through the view are reflected into the viewed buffer,
    and vice versa.

    Note:
        Editing support is only limited to the existing buffer items, i.e. the
        view and its underlying buffer cannot be resized, just like with
        standard memory views.

    Arguments:
        wrapped (mutable sequence):
            Viewed buffer.

        start (int):
            Offset of the first viewed item within `wrapped`.

        size (int):
            Number of viewed items; ``None`` views up to the end of `wrapped`.

    Examples:
        >>> from array2d import GridView
        >>> buffer = [0, 1, 2, 3, 4, 5]
        >>> view = GridView(buffer, 2, 3)
        >>> view.tolist()
        [2, 3, 4]
        >>> view[0] = 9
        >>> buffer
        [0, 1, 9, 3, 4, 5]
        >>> view.fill(7)
        >>> buffer
        [0, 1, 7, 7, 7, 5]
    """

    @abc.abstractmethod
    def __init__(
        self,
        wrapped: Buffer,
        start: int = 0,
        size: Optional[int] = None,
    ):
        ...

    @abc.abstractmethod
    def __delitem__(
        self,
        key: Any,
    ) -> None:
        ...

    @abc.abstractmethod
    def __eq__(
        self,
        other: Any,
    ) -> bool:
        r"""Equality comparison.

        Arguments:
            other (sequence):
                Items to compare with `self`.

        Returns:
            bool: Same length and items.

        Examples:
            >>> from array2d import GridView
            >>> GridView([1, 2, 3], 1) == [2, 3]
            True
            >>> GridView([1, 2, 3], 1) == (2, 3)
            True
            >>> GridView([1, 2, 3], 1) == [2]
            False
        """
        ...

    @abc.abstractmethod
    def __setitem__(
        self,
        key: Union[int, slice],
        value: Any,
    ) -> None:
        r"""Writes items.

        Arguments:
            key (int or slice):
                Index or slice of the view.

            value:
                Item, or items for a slice, which must keep the view size.

        Raises:
            :obj:`IndexError`: Index out of range.

            :obj:`ValueError`: Slice assignment would resize the view.

        Examples:
            >>> from array2d import GridView
            >>> buffer = [0, 0, 0, 0]
            >>> view = GridView(buffer, 1, 2)
            >>> view[-1] = 5
            >>> view[:] = [3, view[1]]
            >>> buffer
            [0, 3, 5, 0]
        """
        ...

    @abc.abstractmethod
    def fill(
        self,
        value: Any,
    ) -> None:
        r"""Overwrites every viewed item with the same value.

        Arguments:
            value:
                Fill value.
        """
        ...

    @property
    @abc.abstractmethod
    def obj(
        self,
    ) -> Buffer:
        r"""mutable sequence: Viewed buffer."""
        ...

    @property
    @abc.abstractmethod
    def start(
        self,
    ) -> int:
        r"""int: Offset of the first viewed item within :attr:`obj`."""
        ...

    @abc.abstractmethod
    def tolist(
        self,
    ) -> List[Any]:
        r"""list: Copy of the viewed items."""
        ...


class BaseCursor(abc.ABC):
    r"""Scanning cursor over the rows or columns of a grid.

    The cursor starts *before* the first line, with :attr:`index` set to
    ``-1``. Each call to :meth:`next` moves it to the following line, until
    all the lines were visited.

    A failed :meth:`scan` latches its error: from then on :meth:`next` always
    returns ``False``, :meth:`scan` raises the same error again, and
    :attr:`error` keeps returning it.

    Examples:
        >>> from array2d import Grid
        >>> grid = Grid.from_jagged(2, 3, [[1, 2, 3], [4, 5, 6]])
        >>> rows = grid.rows()
        >>> dest = [None] * 3
        >>> while rows.next():
        ...     rows.scan(dest)
        ...     print(rows.index, dest)
        0 [1, 2, 3]
        1 [4, 5, 6]
        >>> rows.error is None
        True
    """

    @abc.abstractmethod
    def __iter__(
        self,
    ) -> Iterator[int]:
        r"""Advances the cursor through the remaining lines.

        Yields:
            int: Index of the line the cursor moved to.
        """
        ...

    @property
    @abc.abstractmethod
    def error(
        self,
    ) -> Optional[GridError]:
        r"""Latched scanning error, ``None`` if not errored."""
        ...

    @property
    @abc.abstractmethod
    def index(
        self,
    ) -> int:
        r"""int: Current line index, ``-1`` if not started."""
        ...

    @abc.abstractmethod
    def next(
        self,
    ) -> bool:
        r"""Advances to the next line.

        Returns:
            bool: The cursor moved; ``False`` once past the last line, or
            once an error was latched.
        """
        ...

    @abc.abstractmethod
    def scan(
        self,
        dest: Optional[MutableSequence],
    ) -> None:
        r"""Copies the current line into a destination buffer.

        Arguments:
            dest (mutable sequence):
                Destination buffer, overwritten in place; its length must match
                the length of a line.

        Raises:
            :obj:`InvalidDestinationError`: Missing destination, or with the
                wrong length.

            :obj:`OutOfBoundsError`: The cursor is not positioned on a line.
        """
        ...


class BaseGrid(abc.ABC, Generic[Value]):
    r"""Dense two-dimensional array over a flat buffer.

    The grid stores ``height * width`` items into a single linear `buffer`,
    arranged according to its :class:`Layout`:

    * :attr:`Layout.ROW_MAJOR`: ``offset = col + row * width``;
    * :attr:`Layout.COLUMN_MAJOR`: ``offset = row + col * height``.

    The shape and layout are fixed for the whole lifetime of the grid;
    structural changes require building a new grid.

    Lines aligned with the layout (rows for row-major, columns for
    column-major) are contiguous in the buffer, and they are returned as
    :class:`GridView` objects, aliasing the buffer. Lines across the layout
    are strided, and they are returned as independent :obj:`list` copies.

    All the accessors check their coordinates, raising
    :obj:`OutOfBoundsError` when any of them lies outside the grid.
    Negative coordinates are never wrapped around.

    Warnings:
        A grid built via :meth:`from_buffer` shares the buffer with the
        caller: changes made through the grid are visible to the original
        buffer holder, and vice versa.

    Arguments:
        height (int):
            Number of rows.

        width (int):
            Number of columns.

        zero:
            Initial value of all the items.

        layout (:class:`Layout`):
            Buffer layout.

    Raises:
        :obj:`ShapeMismatchError`: Negative dimensions.

    Examples:
        >>> from array2d import Grid
        >>> grid = Grid(3, 3)
        >>> str(grid)
        '[[0 0 0] [0 0 0] [0 0 0]]'
        >>> grid[1, 2] = 6
        >>> grid
        Grid[int] 3x3 [[0 0 0] [0 0 6] [0 0 0]]
        >>> grid.buffer
        [0, 0, 0, 0, 0, 6, 0, 0, 0]

        >>> grid = Grid(3, 3, layout=Layout.COLUMN_MAJOR)
        >>> grid[1, 2] = 6
        >>> grid.buffer
        [0, 0, 0, 0, 0, 0, 0, 6, 0]
    """

    @abc.abstractmethod
    def __init__(
        self,
        height: int = 0,
        width: int = 0,
        zero: Any = 0,
        layout: Layout = Layout.ROW_MAJOR,
    ):
        ...

    @abc.abstractmethod
    def __copy__(
        self,
    ) -> 'BaseGrid[Value]':
        ...

    @abc.abstractmethod
    def __deepcopy__(
        self,
        memo: Optional[dict] = None,
    ) -> 'BaseGrid[Value]':
        ...

    @abc.abstractmethod
    def __eq__(
        self,
        other: Any,
    ) -> bool:
        r"""Equality comparison.

        Two grids are equal when they have the same shape, and the same items
        at the same coordinates. The layout does not matter.

        Arguments:
            other (grid):
                Grid to compare with `self`.

        Returns:
            bool: `self` is equal to `other`.

        Examples:
            >>> from array2d import Grid
            >>> a = Grid.from_jagged(2, 2, [[1, 2], [3, 4]])
            >>> b = Grid.from_jagged(2, 2, [[1, 2], [3, 4]], layout=Layout.COLUMN_MAJOR)
            >>> a == b
            True
            >>> b[0, 0] = 0
            >>> a == b
            False
        """
        ...

    @abc.abstractmethod
    def __getitem__(
        self,
        key: Tuple[Coordinate, Coordinate],
    ) -> Value:
        r"""Gets an item.

        Same as :meth:`get`, with a ``(row, col)`` key.
        """
        ...

    @abc.abstractmethod
    def __iter__(
        self,
    ) -> Iterator[Value]:
        r"""Iterates over all the items.

        Same as :meth:`values`.
        """
        ...

    @abc.abstractmethod
    def __repr__(
        self,
    ) -> str:
        r"""Debug representation.

        The rendered items of :meth:`__str__` are prefixed by the class name,
        the common type name of the items (``object`` if mixed or empty), and
        the ``height x width`` dimensions.

        Examples:
            >>> from array2d import Grid
            >>> Grid.from_jagged(2, 3, [[0, 1, 2], [3, 4, 5]]).map(lambda v: f'v{v}')
            Grid[str] 2x3 [[v0 v1 v2] [v3 v4 v5]]
            >>> Grid(0, 3)
            Grid[object] 0x3 []
        """
        ...

    @abc.abstractmethod
    def __setitem__(
        self,
        key: Tuple[Coordinate, Coordinate],
        value: Value,
    ) -> None:
        r"""Sets an item.

        Same as :meth:`set`, with a ``(row, col)`` key.
        """
        ...

    @abc.abstractmethod
    def __str__(
        self,
    ) -> str:
        r"""Renders the items as nested bracketed rows.

        Items are rendered via :obj:`str` and separated by a space.

        When the grid has more than :data:`PRINT_THRESHOLD` rows, only the
        first and last :data:`EDGE_ITEMS` rows are printed, separated by
        ``...``. The same happens to columns, independently.

        Examples:
            >>> from array2d import Grid
            >>> str(Grid.from_jagged(2, 3, [[1, 2], [3, 4, 5]]))
            '[[1 2 0] [3 4 5]]'
            >>> str(Grid.filled(2, 12, 7))
            '[[7 7 7 7 7 ... 7 7 7 7 7] [7 7 7 7 7 ... 7 7 7 7 7]]'
            >>> str(Grid(2, 0))
            '[]'
        """
        ...

    @property
    @abc.abstractmethod
    def buffer(
        self,
    ) -> Buffer:
        r"""mutable sequence: Backing buffer, not copied."""
        ...

    @property
    @abc.abstractmethod
    def c_contiguous(
        self,
    ) -> bool:
        r"""bool: Rows are contiguous, *i.e.* row-major layout."""
        ...

    @abc.abstractmethod
    def col(
        self,
        col: Coordinate,
    ) -> Line:
        r"""Gets a whole column.

        With column-major layout, the returned :class:`GridView` aliases the
        buffer, so that changes made through it affect the grid.

        With row-major layout, a new :obj:`list` is returned, holding a copy
        of the column items.

        Arguments:
            col (int):
                Column index.

        Returns:
            :class:`GridView` or :obj:`list`: Column items, top to bottom.

        Raises:
            :obj:`OutOfBoundsError`: Column index out of range.

        Examples:
            >>> from array2d import Grid
            >>> grid = Grid.from_jagged(3, 2, [[1, 2], [3, 4], [5, 6]], layout=Layout.COLUMN_MAJOR)
            >>> column = grid.col(1)
            >>> column[0] = 0
            >>> grid.tolist()
            [[1, 0], [3, 4], [5, 6]]
        """
        ...

    @abc.abstractmethod
    def cols(
        self,
    ) -> BaseCursor:
        r"""Scanning cursor over the columns.

        Returns:
            :class:`BaseCursor`: Column cursor; lines are ``height`` long.
        """
        ...

    @abc.abstractmethod
    def copy(
        self,
    ) -> 'BaseGrid[Value]':
        r"""Creates an independent copy.

        The copy has the same shape and layout, and a freshly duplicated
        buffer, so that changes to either grid never affect the other one.

        Returns:
            :class:`BaseGrid`: Independent copy.
        """
        ...

    @property
    @abc.abstractmethod
    def f_contiguous(
        self,
    ) -> bool:
        r"""bool: Columns are contiguous, *i.e.* column-major layout."""
        ...

    @abc.abstractmethod
    def fill(
        self,
        row1: Coordinate,
        col1: Coordinate,
        row2: Coordinate,
        col2: Coordinate,
        value: Value,
    ) -> None:
        r"""Fills a rectangular region.

        All the items from ``(row1, col1)`` to ``(row2, col2)``, *both
        included*, are set to `value`. Corners can be given in any order.

        Arguments:
            row1 (int):
                Row index of the first corner.

            col1 (int):
                Column index of the first corner.

            row2 (int):
                Row index of the opposite corner.

            col2 (int):
                Column index of the opposite corner.

            value:
                Fill value.

        Raises:
            :obj:`OutOfBoundsError`: Any of the corner coordinates is out of
                range; nothing is written.

        Examples:
            >>> from array2d import Grid
            >>> grid = Grid(3, 4)
            >>> grid.fill(2, 2, 1, 1, 9)
            >>> str(grid)
            '[[0 0 0 0] [0 9 9 0] [0 9 9 0]]'
        """
        ...

    @classmethod
    @abc.abstractmethod
    def filled(
        cls,
        height: int,
        width: int,
        value: Value,
        layout: Layout = Layout.ROW_MAJOR,
    ) -> 'BaseGrid[Value]':
        r"""Creates a grid filled with the same value.

        Arguments:
            height (int):
                Number of rows.

            width (int):
                Number of columns.

            value:
                Value of all the items.

            layout (:class:`Layout`):
                Buffer layout.

        Returns:
            :class:`BaseGrid`: Filled grid.

        Raises:
            :obj:`ShapeMismatchError`: Negative dimensions.
        """
        ...

    @classmethod
    @abc.abstractmethod
    def from_buffer(
        cls,
        height: int,
        width: int,
        buffer: Buffer,
        layout: Layout = Layout.ROW_MAJOR,
    ) -> 'BaseGrid[Value]':
        r"""Wraps an existing buffer.

        Warnings:
            The buffer is **not** copied: changes made to the buffer are
            visible through the grid, and vice versa.

        Arguments:
            height (int):
                Number of rows.

            width (int):
                Number of columns.

            buffer (mutable sequence):
                Buffer with exactly ``height * width`` items, arranged as per
                `layout`. It must support slice assignment.

            layout (:class:`Layout`):
                Buffer layout.

        Returns:
            :class:`BaseGrid`: Grid sharing `buffer`.

        Raises:
            :obj:`ShapeMismatchError`: Buffer length mismatch.

        Examples:
            >>> from array2d import Grid
            >>> buffer = [1, 2, 3, 4, 5, 6]
            >>> grid = Grid.from_buffer(2, 3, buffer)
            >>> str(grid)
            '[[1 2 3] [4 5 6]]'
            >>> buffer[0] = 99
            >>> grid[0, 0]
            99
            >>> Grid.from_buffer(2, 2, [1, 2, 3])
            Traceback (most recent call last):
                ...
            array2d.base.ShapeMismatchError: buffer length 3 does not match height*width 4
        """
        ...

    @classmethod
    @abc.abstractmethod
    def from_jagged(
        cls,
        height: int,
        width: int,
        rows: JaggedRows,
        zero: Any = 0,
        layout: Layout = Layout.ROW_MAJOR,
    ) -> 'BaseGrid[Value]':
        r"""Creates a grid from a jagged sequence of rows.

        Each row is copied at its own row index. Missing rows, and missing
        items of short rows, are set to `zero`.

        Arguments:
            height (int):
                Number of rows.

            width (int):
                Number of columns.

            rows (sequence of sequences):
                Row items, top to bottom.

            zero:
                Padding value.

            layout (:class:`Layout`):
                Buffer layout.

        Returns:
            :class:`BaseGrid`: New grid.

        Raises:
            :obj:`ShapeMismatchError`: More rows than `height`, or a row
                longer than `width`.

        Examples:
            >>> from array2d import Grid
            >>> str(Grid.from_jagged(3, 3, [[1, 2], [3, 4, 5]]))
            '[[1 2 0] [3 4 5] [0 0 0]]'
            >>> Grid.from_jagged(2, 1, [[1], [2, 3]])
            Traceback (most recent call last):
                ...
            array2d.base.ShapeMismatchError: row 1 width 2 exceeds specified width 1
        """
        ...

    @abc.abstractmethod
    def get(
        self,
        row: Coordinate,
        col: Coordinate,
    ) -> Value:
        r"""Gets an item.

        Arguments:
            row (int):
                Row index.

            col (int):
                Column index.

        Returns:
            Item at the requested coordinates.

        Raises:
            :obj:`OutOfBoundsError`: Coordinate out of range.

        Examples:
            >>> from array2d import Grid
            >>> grid = Grid.from_jagged(2, 2, [[1, 2], [3, 4]])
            >>> grid.get(1, 0)
            3
            >>> grid.get(0, 2)
            Traceback (most recent call last):
                ...
            array2d.base.OutOfBoundsError: col index 2 out of range for width 2
        """
        ...

    @property
    @abc.abstractmethod
    def height(
        self,
    ) -> int:
        r"""int: Number of rows."""
        ...

    @abc.abstractmethod
    def items(
        self,
    ) -> Iterator[Tuple[Coordinate, Coordinate, Value]]:
        r"""Iterates over all the coordinates and items.

        Items are visited row by row, left to right, regardless of the
        layout.

        Yields:
            tuple: ``(row, col, value)`` triples.

        Examples:
            >>> from array2d import Grid
            >>> grid = Grid.from_jagged(2, 2, [[1, 2], [3, 4]], layout=Layout.COLUMN_MAJOR)
            >>> list(grid.items())
            [(0, 0, 1), (0, 1, 2), (1, 0, 3), (1, 1, 4)]
        """
        ...

    @abc.abstractmethod
    def iter_col(
        self,
        col: Coordinate,
    ) -> Iterator[Tuple[Coordinate, Value]]:
        r"""Iterates over a column, top to bottom.

        Arguments:
            col (int):
                Column index, checked immediately.

        Returns:
            iterator: ``(row, value)`` pairs.

        Raises:
            :obj:`OutOfBoundsError`: Column index out of range.
        """
        ...

    @abc.abstractmethod
    def iter_row(
        self,
        row: Coordinate,
    ) -> Iterator[Tuple[Coordinate, Value]]:
        r"""Iterates over a row, left to right.

        Arguments:
            row (int):
                Row index, checked immediately.

        Returns:
            iterator: ``(col, value)`` pairs.

        Raises:
            :obj:`OutOfBoundsError`: Row index out of range.

        Examples:
            >>> from array2d import Grid
            >>> grid = Grid.from_jagged(2, 2, [[1, 2], [3, 4]])
            >>> list(grid.iter_row(1))
            [(0, 3), (1, 4)]
            >>> grid.iter_row(2)
            Traceback (most recent call last):
                ...
            array2d.base.OutOfBoundsError: row index 2 out of range for height 2
        """
        ...

    @property
    @abc.abstractmethod
    def layout(
        self,
    ) -> Layout:
        r""":class:`Layout`: Buffer layout."""
        ...

    @abc.abstractmethod
    def map(
        self,
        transform: Callable[[Value], Mapped],
    ) -> 'BaseGrid[Mapped]':
        r"""Maps all the items into a new grid.

        Items are passed to `transform` in the same order as :meth:`items`.
        The source grid is not modified.

        Arguments:
            transform (callable):
                Function mapping an item into a new item.

        Returns:
            :class:`BaseGrid`: New grid, with the same shape and layout.

        Examples:
            >>> from array2d import Grid
            >>> grid = Grid.from_jagged(2, 2, [[1, 2], [3, 4]])
            >>> grid.map(lambda v: v * 10).tolist()
            [[10, 20], [30, 40]]
        """
        ...

    @property
    def ndim(
        self,
    ) -> int:
        r"""int: Number of dimensions, always 2."""

        return 2

    @abc.abstractmethod
    def row(
        self,
        row: Coordinate,
    ) -> Line:
        r"""Gets a whole row.

        With row-major layout, the returned :class:`GridView` aliases the
        buffer, so that changes made through it affect the grid.

        With column-major layout, a new :obj:`list` is returned, holding a
        copy of the row items.

        Arguments:
            row (int):
                Row index.

        Returns:
            :class:`GridView` or :obj:`list`: Row items, left to right.

        Raises:
            :obj:`OutOfBoundsError`: Row index out of range.

        Examples:
            >>> from array2d import Grid
            >>> grid = Grid(2, 3)
            >>> grid.row(1)[:] = [1, 2, 3]
            >>> str(grid)
            '[[0 0 0] [1 2 3]]'
        """
        ...

    @abc.abstractmethod
    def row_span(
        self,
        row: Coordinate,
        col1: Coordinate,
        col2: Coordinate,
    ) -> Line:
        r"""Gets a portion of a row.

        Items from `col1` to `col2`, *both included*, are returned; column
        bounds can be given in any order.

        With row-major layout, the returned :class:`GridView` aliases the
        buffer; with column-major layout a :obj:`list` copy is returned.

        Arguments:
            row (int):
                Row index.

            col1 (int):
                Column bound.

            col2 (int):
                Other column bound.

        Returns:
            :class:`GridView` or :obj:`list`: Row span items.

        Raises:
            :obj:`OutOfBoundsError`: Any coordinate out of range.

        Examples:
            >>> from array2d import Grid
            >>> grid = Grid(2, 5)
            >>> grid.row_span(1, 3, 1).fill(4)
            >>> str(grid)
            '[[0 0 0 0 0] [0 4 4 4 0]]'
        """
        ...

    @abc.abstractmethod
    def rows(
        self,
    ) -> BaseCursor:
        r"""Scanning cursor over the rows.

        Returns:
            :class:`BaseCursor`: Row cursor; lines are ``width`` long.
        """
        ...

    @abc.abstractmethod
    def set(
        self,
        row: Coordinate,
        col: Coordinate,
        value: Value,
    ) -> None:
        r"""Sets an item.

        Arguments:
            row (int):
                Row index.

            col (int):
                Column index.

            value:
                Item to write.

        Raises:
            :obj:`OutOfBoundsError`: Coordinate out of range.
        """
        ...

    @property
    def shape(
        self,
    ) -> Shape:
        r"""tuple: ``(height, width)`` pair."""

        return self.height, self.width

    @property
    def size(
        self,
    ) -> int:
        r"""int: Number of items, *i.e.* ``height * width``."""

        return self.height * self.width

    @property
    @abc.abstractmethod
    def strides(
        self,
    ) -> Tuple[int, int]:
        r"""tuple: Buffer offset increments for a row step and a column step.

        Examples:
            >>> from array2d import Grid
            >>> Grid(2, 3).strides
            (3, 1)
            >>> Grid(2, 3, layout=Layout.COLUMN_MAJOR).strides
            (1, 2)
        """
        ...

    @abc.abstractmethod
    def to_slices(
        self,
    ) -> List[Line]:
        r"""Splits the grid into rows.

        Returns:
            list: Rows as returned by :meth:`row`, *i.e.* aliasing views for
            row-major layout, independent copies for column-major layout.
        """
        ...

    @abc.abstractmethod
    def to_slices_by_col(
        self,
    ) -> List[Line]:
        r"""Splits the grid into columns.

        Returns:
            list: Columns as returned by :meth:`col`, *i.e.* aliasing views
            for column-major layout, independent copies for row-major layout.
        """
        ...

    @abc.abstractmethod
    def tolist(
        self,
    ) -> List[List[Value]]:
        r"""list: Independent copy of the rows, as nested lists."""
        ...

    @abc.abstractmethod
    def values(
        self,
    ) -> Iterator[Value]:
        r"""Iterates over all the items.

        Items are visited row by row, left to right, regardless of the
        layout.

        Yields:
            Grid items.
        """
        ...

    @property
    @abc.abstractmethod
    def width(
        self,
    ) -> int:
        r"""int: Number of columns."""
        ...

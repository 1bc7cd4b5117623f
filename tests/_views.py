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

import array
from typing import Type

import pytest

from array2d.py import BaseGridView as _GridView

try:
    import numpy
except ImportError:  # pragma: no cover
    numpy = None


@pytest.fixture
def digits():
    return list(range(10))


@pytest.fixture
def hexstr():
    return bytearray(b'0123456789ABCDEF')


class GridViewSuite:

    GridView: Type['_GridView'] = _GridView

    def test___delitem__(self, digits):
        GridView = self.GridView
        instance = GridView(digits, 2, 3)
        with pytest.raises(TypeError):
            del instance[0]
        assert digits == list(range(10))

    def test___eq__(self, digits):
        GridView = self.GridView
        instance = GridView(digits, 2, 3)
        assert (instance == [2, 3, 4]) is True
        assert (instance == (2, 3, 4)) is True
        assert (instance == range(2, 5)) is True
        assert (instance == [2, 3]) is False
        assert (instance == [2, 3, 5]) is False
        assert (instance == GridView(list(range(2, 5)))) is True
        assert ([2, 3, 4] == instance) is True
        assert (instance == 234) is False
        assert (instance != [2, 3, 4]) is False

    def test___eq__str(self):
        GridView = self.GridView
        assert (GridView(list('abc')) == 'abc') is False

    def test___getitem__(self, digits):
        GridView = self.GridView
        instance = GridView(digits, 3, 4)

        for index in range(4):
            assert instance[index] == digits[3 + index]
            assert instance[index - 4] == digits[3 + index]

        assert instance[1:3] == [4, 5]
        assert instance[::2] == [3, 5]
        assert instance[::-1] == [6, 5, 4, 3]
        assert instance[2:100] == [5, 6]

    def test___getitem___out_of_range(self, digits):
        GridView = self.GridView
        instance = GridView(digits, 3, 4)
        with pytest.raises(IndexError, match='view index out of range'):
            instance[4]  # noqa
        with pytest.raises(IndexError, match='view index out of range'):
            instance[-5]  # noqa

    def test___getitem___type(self, digits):
        GridView = self.GridView
        with pytest.raises(TypeError):
            GridView(digits)[1.0]  # noqa

    def test___init__(self, digits, hexstr):
        GridView = self.GridView
        assert len(GridView(digits)) == 10
        assert len(GridView(digits, 4)) == 6
        assert len(GridView(digits, 4, 0)) == 0
        assert len(GridView(digits, 10)) == 0
        assert len(GridView(hexstr, 1, 2)) == 2
        assert len(GridView(array.array('B', b'xyz'))) == 3

        if numpy is not None:  # pragma: no cover
            assert len(GridView(numpy.zeros(5, dtype=int), 1, 3)) == 3

    def test___init___bounds(self, digits):
        GridView = self.GridView
        with pytest.raises(ValueError, match='out of buffer bounds'):
            GridView(digits, -1)
        with pytest.raises(ValueError, match='out of buffer bounds'):
            GridView(digits, 11)
        with pytest.raises(ValueError, match='out of buffer bounds'):
            GridView(digits, 5, 6)
        with pytest.raises(ValueError, match='out of buffer bounds'):
            GridView(digits, 5, -1)

    def test___iter__(self, digits):
        GridView = self.GridView
        for start in range(len(digits)):
            for size in range(len(digits) - start):
                assert list(GridView(digits, start, size)) == digits[start:start + size]

    def test___len__(self, digits):
        GridView = self.GridView
        for start in range(len(digits)):
            for size in range(len(digits) - start):
                assert len(GridView(digits, start, size)) == size

    def test___repr__(self, digits):
        GridView = self.GridView
        assert repr(GridView(digits, 1, 2)) == f'{GridView.__name__}([1, 2])'

    def test___reversed__(self, digits):
        GridView = self.GridView
        assert list(reversed(GridView(digits, 1, 3))) == [3, 2, 1]

    def test___setitem__(self, digits):
        GridView = self.GridView
        instance = GridView(digits, 3, 4)
        instance[0] = 'a'
        instance[-1] = 'z'
        assert digits == [0, 1, 2, 'a', 4, 5, 'z', 7, 8, 9]

        instance[1:3] = 'bc'
        assert digits == [0, 1, 2, 'a', 'b', 'c', 'z', 7, 8, 9]

        instance[::-1] = [6, 5, 4, 3]
        assert digits == list(range(10))

    def test___setitem___resize(self, digits):
        GridView = self.GridView
        instance = GridView(digits, 3, 4)
        with pytest.raises(ValueError, match='view cannot be resized'):
            instance[1:3] = [0]
        with pytest.raises(ValueError, match='view cannot be resized'):
            instance[:] = range(5)
        with pytest.raises(IndexError):
            instance[4] = 0
        assert digits == list(range(10))

    def test___setitem___bytearray(self, hexstr):
        GridView = self.GridView
        instance = GridView(hexstr, 10, 6)
        instance[:] = b'abcdef'
        assert hexstr == bytearray(b'0123456789abcdef')

    def test_count(self):
        GridView = self.GridView
        assert GridView([1, 2, 1, 1, 3], 1, 3).count(1) == 2

    def test_fill(self, digits):
        GridView = self.GridView
        for start in range(len(digits)):
            for size in range(len(digits) - start):
                values = list(digits)
                GridView(values, start, size).fill(-1)
                assert values == digits[:start] + [-1] * size + digits[start + size:]

    def test_fill_array(self):
        GridView = self.GridView
        buffer = array.array('h', range(8))
        GridView(buffer, 1, 6).fill(-1)
        assert buffer.tolist() == [0, -1, -1, -1, -1, -1, -1, 7]

    def test_fill_numpy(self):
        if numpy is None:  # pragma: no cover
            pytest.skip('numpy not available')
        buffer = numpy.arange(8)
        self.GridView(buffer, 2, 5).fill(9)
        assert buffer.tolist() == [0, 1, 9, 9, 9, 9, 9, 7]

    def test_index(self, digits):
        GridView = self.GridView
        instance = GridView(digits, 3, 4)
        assert instance.index(5) == 2
        with pytest.raises(ValueError):
            instance.index(9)

    def test_obj(self, digits):
        GridView = self.GridView
        assert GridView(digits, 3, 4).obj is digits

    def test_start(self, digits):
        GridView = self.GridView
        assert GridView(digits).start == 0
        assert GridView(digits, 3, 4).start == 3

    def test_tolist(self, digits):
        GridView = self.GridView
        instance = GridView(digits, 3, 4)
        values = instance.tolist()
        assert values == [3, 4, 5, 6]
        values[0] = None
        assert digits[3] == 3

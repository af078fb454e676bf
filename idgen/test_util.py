# Copyright 2019–2020 Leibniz Institute for Psychology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import logging
from datetime import timedelta

import pytest

from .util import group, regroup, stripSeparators, checkLength, now, InvalidLength

@pytest.mark.parametrize("s,groupSize,expected", [
	pytest.param ('abcdefghij', 4, 'abcd-efgh-ij', id='remainder'),
	pytest.param ('123456789', 3, '123-456-789', id='even'),
	pytest.param ('abcdefgh', 0, 'abcdefgh', id='zero'),
	pytest.param ('abcdefgh', -2, 'abcdefgh', id='negative'),
	pytest.param ('abcd', 5, 'abcd', id='larger'),
	pytest.param ('abcd', 4, 'abcd', id='equal'),
	pytest.param ('abc', 1, 'a-b-c', id='single'),
	pytest.param ('abcdef', 2, 'ab-cd-ef', id='pairs'),
	pytest.param ('', 3, '', id='empty'),
	pytest.param ('ab-cdef', 3, 'ab--cde-f', id='keeps-separators'),
	])
def test_group (s, groupSize, expected):
	assert group (s, groupSize) == expected

@pytest.mark.parametrize("s,groupSize,expected", [
	pytest.param ('lusab-babad', 5, 'lusab-babad', id='proquint'),
	pytest.param ('lusab-babad', 4, 'lusa-bbab-ad', id='proquint-4'),
	pytest.param ('ab-cdef', 3, 'abc-def', id='stray-separator'),
	pytest.param ('ab-cdef', 0, 'ab-cdef', id='disabled'),
	pytest.param ('lusab-babad', 11, 'lusab-babad', id='whole-id'),
	pytest.param ('lusab-babad', 30, 'lusab-babad', id='larger-than-id'),
	pytest.param ('lusab-babad', 10, 'lusabbabad', id='larger-than-stripped'),
	])
def test_regroup (s, groupSize, expected):
	assert regroup (s, groupSize) == expected

@pytest.mark.parametrize("s", ['abcdefghijk', 'ab-cd-efg', 'lusab-babad-gutih-tugad', ''])
@pytest.mark.parametrize("k", [1, 2, 3, 5, 8, 30])
def test_regroupIdempotent (s, k):
	assert group (stripSeparators (group (s, k)), k) == group (stripSeparators (s), k)
	assert regroup (regroup (s, k), k) == regroup (s, k)

def test_checkLength (caplog):
	assert checkLength (1) == 1
	assert checkLength (1024) == 1024
	for l in (0, -1, 1025):
		with pytest.raises (InvalidLength):
			checkLength (l)

	caplog.clear ()
	with caplog.at_level (logging.WARNING):
		checkLength (128)
	assert not caplog.records
	with caplog.at_level (logging.WARNING):
		checkLength (129)
	assert 'unusually long' in caplog.text

def test_now ():
	assert now ().utcoffset () == timedelta (0)

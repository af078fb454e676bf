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

import pytest

from .nano import generate, internalLength, resolveAlphabet, InvalidAlphabet, \
		ALPHANUMERIC, NUMERIC, READABLE

def test_presets ():
	assert len (ALPHANUMERIC) == 62
	assert NUMERIC == '0123456789'
	assert READABLE == '23456789abcdefghkmnpqrstwxyzABCDEFGHJKLMNPQRSTWXYZ'
	for c in '0O1lI':
		assert c not in READABLE

@pytest.mark.parametrize("name,expected", [
	('alphanumeric', ALPHANUMERIC),
	('numeric', NUMERIC),
	('readable', READABLE),
	pytest.param ('Numeric', 'Numeric', id='custom-capitalized'),
	pytest.param ('READABLE', 'READABLE', id='custom-uppercase'),
	('abc', 'abc'),
	])
def test_resolveAlphabet (name, expected):
	assert resolveAlphabet (name) == expected

@pytest.mark.parametrize("length,groupSize,expected", [
	pytest.param (21, 0, 21, id='no-grouping'),
	pytest.param (14, 4, 12, id='group-4'),
	pytest.param (12, 3, 10, id='group-3'),
	pytest.param (5, 1, 3, id='group-1'),
	pytest.param (1, 4, 1, id='short'),
	])
def test_internalLength (length, groupSize, expected):
	assert internalLength (length, groupSize) == expected

@pytest.mark.parametrize("seed", [None, 42, -7])
def test_alphabetFidelity (seed):
	ident = generate ('abc', 50, seed)
	assert len (ident) == 50
	assert set (ident) <= set ('abc')

def test_seededDeterministic ():
	a = generate (NUMERIC, 12, 42)
	assert a == generate (NUMERIC, 12, 42)
	assert len (a) == 12
	assert a.isdigit ()

def test_seededDistinct ():
	assert generate (ALPHANUMERIC, 21, 1) != generate (ALPHANUMERIC, 21, 2)

def test_unseeded ():
	a = generate (ALPHANUMERIC, 21)
	assert len (a) == 21
	assert set (a) <= set (ALPHANUMERIC)
	assert a != generate (ALPHANUMERIC, 21)

@pytest.mark.parametrize("seed", [None, 42])
@pytest.mark.parametrize("length,groupSize", [(14, 4), (11, 3), (21, 5), (20, 5)])
def test_grouping (seed, length, groupSize):
	ident = generate (READABLE, length, seed, groupSize)
	assert len (ident) == length
	parts = ident.split ('-')
	assert all (len (p) == groupSize for p in parts[:-1])
	assert 0 < len (parts[-1]) <= groupSize

def test_singleCharacter ():
	assert generate ('x', 5) == 'xxxxx'
	assert generate ('x', 5, 42) == 'xxxxx'

def test_zeroLength ():
	assert generate ('abc', 0) == ''
	assert generate ('abc', 0, 1) == ''

@pytest.mark.parametrize("seed", [
	pytest.param (None, id='unseeded'),
	# seeded generation used to fail with a modulo by zero
	pytest.param (42, id='seeded'),
	])
def test_emptyAlphabet (seed):
	with pytest.raises (InvalidAlphabet):
		generate ('', 10, seed)

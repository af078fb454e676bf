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

from nanoid import generate as secureGenerate

from .stream import seededBytes
from .util import IdgenException, group

logger = logging.getLogger (__name__)

ALPHANUMERIC = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789'
NUMERIC = '0123456789'
# no 0/O and 1/l/I
READABLE = '23456789abcdefghkmnpqrstwxyzABCDEFGHJKLMNPQRSTWXYZ'

presets = dict (
		alphanumeric=ALPHANUMERIC,
		numeric=NUMERIC,
		readable=READABLE,
		)

class InvalidAlphabet (IdgenException):
	pass

def resolveAlphabet (name):
	""" Preset name or custom alphabet, names are case-sensitive """
	return presets.get (name, name)

def internalLength (length, groupSize):
	"""
	Number of alphabet characters needed, so the id is exactly length
	characters long after grouping it with groupSize.
	"""
	if groupSize <= 0:
		return length
	# ceil ((length*groupSize+1)/(groupSize+1))
	return -(-(length*groupSize+1) // (groupSize+1))

def seededChars (alphabet, length, seed):
	""" Draw length characters from alphabet, deterministic for seed """
	stream = seededBytes (seed, length*8)
	n = len (alphabet)
	return ''.join (alphabet[int.from_bytes (stream[i*8:(i+1)*8], 'little') % n]
			for i in range (length))

def generate (alphabet, length, seed=None, groupSize=0):
	"""
	Generate a NanoID of length characters from alphabet.

	Without seed the secure generator from the nanoid package is used. With
	seed the output is reproducible, but not cryptographically secure.
	When groupSize is positive, length includes the separators.
	"""
	if not alphabet:
		raise InvalidAlphabet ('Alphabet must not be empty')

	n = internalLength (length, groupSize)
	if n <= 0:
		# nanoid never returns for size zero
		ident = ''
	elif seed is None:
		ident = secureGenerate (alphabet, n)
	else:
		logger.debug (f'seeded NanoID generation with {len (alphabet)} character alphabet')
		ident = seededChars (alphabet, n, seed)

	if groupSize > 0:
		ident = group (ident, groupSize)
	return ident

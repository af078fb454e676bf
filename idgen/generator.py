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

"""
Generators taking raw user input, as a configuration-driven front end would
supply it: lengths are validated, seeds are strings and problems are logged
as warnings where they do not prevent generation.
"""

import logging

from . import nano, uid
from .config import DEFAULT_PROQUINT_LENGTH, DEFAULT_NANOID_LENGTH, \
		DEFAULT_NANOID_ALPHABET, SEPARATOR
from .seed import interpret, parseCanonicalValue
from .util import checkLength, regroup
from .words import parseWordlist, selectWord

logger = logging.getLogger (__name__)

# characters of a canonical 32 and 64 bit proquint
CANONICAL_LENGTHS = (11, 23)

def proquintByteLength (length):
	""" Bytes needed for a proquint of roughly length characters """
	# every two bytes yield five letters plus a separator
	return max (2, (length+1)//6*2)

def proquint (length=DEFAULT_PROQUINT_LENGTH, seed=None, groupSize=None):
	checkLength (length)
	byteLength = proquintByteLength (length)

	value = None
	directEncode = False
	if seed is not None:
		value, directEncode = interpret (seed)
		if directEncode:
			canonicalLength = CANONICAL_LENGTHS[0] if value <= uid.CANONICAL32_MAX else CANONICAL_LENGTHS[1]
			if length != canonicalLength:
				action = 'truncated' if length < canonicalLength else 'zero-padded'
				logger.warning (f'Non-canonical length for direct encoding: {seed} is '
						f'canonically encoded to {canonicalLength} characters, but '
						f'length {length} was requested. The output will be {action}.')
		else:
			logger.info ('Seeded proquints are reproducible, but not cryptographically secure')

	ident = uid.generateQuint (byteLength, value, directEncode)
	if groupSize:
		ident = regroup (ident, groupSize)
	return ident

def canonical (value, groupSize=None):
	""" Canonical proquint of an IPv4 address, integer or hex string """
	ident = uid.encodeCanonical (parseCanonicalValue (value))
	if groupSize:
		ident = regroup (ident, groupSize)
	return ident

def nanoid (length=DEFAULT_NANOID_LENGTH, alphabet=DEFAULT_NANOID_ALPHABET, seed=None, groupSize=None):
	checkLength (length)
	alphabet = nano.resolveAlphabet (alphabet)
	groupSize = groupSize or 0

	if groupSize > 0 and SEPARATOR in alphabet:
		logger.warning (f'Alphabet contains the group separator {SEPARATOR!r}, '
				'groups may be hard to tell apart.')

	value = None
	if seed is not None:
		value = interpret (seed).value
		logger.info ('Seeded NanoIDs are reproducible, but not cryptographically secure')

	return nano.generate (alphabet, length, value, groupSize)

def randomWord (seed=None, wordlist=None):
	# no seed is just another seed, so the result is always deterministic
	return selectWord (seed or '', parseWordlist (wordlist))

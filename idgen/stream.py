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
Deterministic byte stream driven by a 64 bit seed.

The stream is backed by Python’s Mersenne Twister, whose integer seeding and
getrandbits() output are stable across interpreter versions and platforms.
It is *not* cryptographically secure and must never be used for secrets.
"""

import random

def seededBytes (seed, length):
	""" Return length pseudo-random bytes for seed """
	if length < 0:
		raise ValueError (f'Length must not be negative, got {length}')

	# random.seed() uses abs(seed), so reinterpret as unsigned to keep
	# negative seeds distinct
	rng = random.Random (seed & 0xffffffffffffffff)
	out = bytearray ()
	for i in range (0, length, 8):
		word = rng.getrandbits (64).to_bytes (8, 'little')
		# partial final word contributes its low-order bytes only
		out.extend (word[:length-i])
	return bytes (out)

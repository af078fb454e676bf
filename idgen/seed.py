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
Turn arbitrary user input into seeds.

IPv4 addresses and integers up to 0xffffffff are encoded directly (the
canonical proquint behaviour), everything else is used to seed a
pseudo-random generator.
"""

import re, logging, ipaddress
from collections import namedtuple

from .util import IdgenException

logger = logging.getLogger (__name__)

FNV64_OFFSET = 14695981039346656037
FNV64_PRIME = 1099511628211

UINT32_MAX = 2**32-1
INT64_MIN = -2**63
INT64_MAX = 2**63-1
UINT64_MAX = 2**64-1

decimalRe = re.compile (r'[+-]?[0-9]+')
unsignedRe = re.compile (r'\+?[0-9]+')
negativeRe = re.compile (r'-[0-9]+')
hexRe = re.compile (r'(?:0[xX])?([0-9a-fA-F]{1,16})')
# dotted quad without leading zeros, range is checked by ipaddress
ipv4Re = re.compile (r'(?:0|[1-9][0-9]{0,2})(?:\.(?:0|[1-9][0-9]{0,2})){3}')

Seed = namedtuple ('Seed', ['value', 'directEncode'])

class InvalidValue (IdgenException):
	pass

class IPv6Unsupported (InvalidValue):
	pass

def fnv1a64 (data):
	""" FNV-1a hash of data, as unsigned 64 bit integer """
	h = FNV64_OFFSET
	for b in data:
		h = ((h ^ b) * FNV64_PRIME) & UINT64_MAX
	return h

def toSigned64 (v):
	v &= UINT64_MAX
	return v - 2**64 if v > INT64_MAX else v

def toUnsigned64 (v):
	return v & UINT64_MAX

def significantDigits (s):
	""" Number of digits without sign and leading zeros """
	return len (s.lstrip ('+-').lstrip ('0'))

def parseIPv4 (s):
	""" Dotted quad to big-endian integer or None """
	if not ipv4Re.fullmatch (s):
		return None
	try:
		return int (ipaddress.IPv4Address (s))
	except ValueError:
		return None

def interpret (s):
	""" Classify s and turn it into a Seed """
	ip = parseIPv4 (s)
	if ip is not None:
		return Seed (ip, True)

	if decimalRe.fullmatch (s) and significantDigits (s) <= 19:
		v = int (s, 10)
		if INT64_MIN <= v <= INT64_MAX:
			return Seed (v, 0 <= v <= UINT32_MAX)
		logger.debug (f'{s} does not fit into 64 bits, hashing it')

	return Seed (toSigned64 (fnv1a64 (s.encode ('utf-8'))), False)

def parseCanonicalValue (s):
	"""
	Parse IPv4 addresses, unsigned decimal integers and hexadecimal strings
	(with or without 0x prefix) into an unsigned 64 bit value suitable for
	canonical encoding.
	"""
	ip = parseIPv4 (s)
	if ip is not None:
		return ip

	if ':' in s:
		try:
			ipaddress.IPv6Address (s)
		except ValueError:
			pass
		else:
			raise IPv6Unsupported (f'{s}: IPv6 addresses are not supported, only IPv4')

	if negativeRe.fullmatch (s):
		raise InvalidValue (f'{s}: negative values are not supported')

	if unsignedRe.fullmatch (s) and significantDigits (s) <= 20:
		v = int (s, 10)
		if v <= UINT64_MAX:
			return v

	m = hexRe.fullmatch (s)
	if m:
		return int (m.group (1), 16)

	raise InvalidValue (f'{s}: not a valid value, expected an IPv4 address, an unsigned integer or a hexadecimal string')

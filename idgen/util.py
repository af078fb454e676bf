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
from datetime import datetime

import pytz

from .config import MIN_LENGTH, MAX_LENGTH, WARN_LENGTH, SEPARATOR

logger = logging.getLogger (__name__)

class IdgenException (Exception):
	pass

class InvalidLength (IdgenException):
	pass

def group (s, groupSize, sep=SEPARATOR):
	"""
	Insert sep between groups of groupSize characters, i.e. group
	('abcdefghij', 4) → 'abcd-efgh-ij'. Existing separators are kept.
	"""
	if groupSize <= 0 or groupSize >= len (s):
		return s

	out = []
	for i, c in enumerate (s):
		if i > 0 and i % groupSize == 0:
			out.append (sep)
		out.append (c)
	return ''.join (out)

def stripSeparators (s, sep=SEPARATOR):
	return s.replace (sep, '')

def regroup (s, groupSize, sep=SEPARATOR):
	"""
	Like group, but remove any existing separators first. Strings no longer
	than groupSize are returned as they are, separators included.
	"""
	if groupSize <= 0 or groupSize >= len (s):
		return s
	return group (stripSeparators (s, sep), groupSize, sep)

def checkLength (length):
	""" Apply length policy for generated ids """
	if not MIN_LENGTH <= length <= MAX_LENGTH:
		raise InvalidLength (f'Length must be between {MIN_LENGTH} and {MAX_LENGTH}, got {length}')
	if length > WARN_LENGTH:
		logger.warning (f'Length {length} is unusually long, ids above {WARN_LENGTH} characters are rarely useful')
	return length

def now ():
	return datetime.now (tz=pytz.utc)

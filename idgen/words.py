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
from functools import lru_cache

import importlib_resources

from .seed import interpret

logger = logging.getLogger (__name__)

@lru_cache (maxsize=None)
def defaultWords ():
	""" Bundled list of five letter words, deduplicated and sorted """
	text = (importlib_resources.files (__package__) / 'data' / 'words.txt').read_text (encoding='utf-8')
	words = set ()
	for l in text.splitlines ():
		l = l.strip ()
		if not l or l.startswith ('#'):
			continue
		words.add (l)
	logger.debug (f'loaded {len (words)} default words')
	return tuple (sorted (words))

def parseWordlist (wordlist):
	""" Comma-separated string or sequence to list of non-blank words """
	if not wordlist:
		return []
	if isinstance (wordlist, str):
		wordlist = wordlist.split (',')
	return [w.strip () for w in wordlist if w.strip ()]

def selectWord (seed, wordlist=None):
	"""
	Deterministically pick a word from wordlist (or the default list) by
	interpreting seed. Custom lists are sorted, not deduplicated.
	"""
	words = sorted (wordlist or defaultWords ())
	# Python’s modulo is never negative for a positive divisor
	return words[interpret (seed).value % len (words)]

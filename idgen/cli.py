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

import argparse, os, logging, sys, json
from enum import Enum, auto
from datetime import datetime
from functools import partial

import yaml

from . import generator
from .util import IdgenException, now
from .config import DEFAULT_PROQUINT_LENGTH, DEFAULT_NANOID_LENGTH, DEFAULT_NANOID_ALPHABET

logger = logging.getLogger ('cli')

class Formatter (Enum):
	HUMAN = auto ()
	YAML = auto ()
	JSON = auto ()

class Encoder (json.JSONEncoder):
	def default (self, obj):
		if isinstance(obj, datetime):
			return obj.isoformat ()
		return json.JSONEncoder.default (self, obj)

def jsonDump (o, fd=None):
	return json.dump (o, fd, cls=Encoder)

def formatResult (args, r, human=None):
	if args.format == Formatter.HUMAN:
		if human:
			print (human)
	elif args.format == Formatter.YAML:
		yaml.dump (r, sys.stdout)
		sys.stdout.write ('---\n')
	elif args.format == Formatter.JSON:
		jsonDump (r, sys.stdout)
		sys.stdout.write ('\n')
	else:
		assert False

def formatId (args, kind, ident, **extra):
	formatResult (args, dict (status='ok', kind=kind, id=ident,
			generated=now (), **extra), ident)

def doProquint (args):
	ident = generator.proquint (args.length, args.seed, args.groupSize)
	formatId (args, 'proquint', ident, seed=args.seed)
	return 0

def doCanonical (args):
	ident = generator.canonical (args.value, args.groupSize)
	formatId (args, 'proquint_canonical', ident, value=args.value)
	return 0

def doNanoid (args):
	ident = generator.nanoid (args.length, args.alphabet, args.seed, args.groupSize)
	formatId (args, 'nanoid', ident, seed=args.seed)
	return 0

def doWord (args):
	ident = generator.randomWord (args.seed, args.wordlist)
	formatId (args, 'random_word', ident, seed=args.seed)
	return 0

def doHelp (parser, args):
	parser.print_usage ()
	return 1

def loadConfig (paths):
	""" Merge YAML config files, later files override earlier ones """
	config = dict ()
	for f in paths:
		try:
			with open (f) as fd:
				config.update (yaml.safe_load (fd) or dict ())
		except FileNotFoundError:
			pass
	return config

def applyConfig (args, config):
	""" Fill in options not given on the command line """
	defaults = dict (groupSize=None, alphabet=DEFAULT_NANOID_ALPHABET, wordlist=None)
	for k, fallback in defaults.items ():
		if k in args and getattr (args, k) is None:
			setattr (args, k, config.get (k, fallback))
	if 'length' in args and args.length is None:
		lengths = config.get ('length', dict ())
		default = DEFAULT_PROQUINT_LENGTH if args.func is doProquint else DEFAULT_NANOID_LENGTH
		args.length = lengths.get (args.kind, default) if isinstance (lengths, dict) else lengths

def main (argv=None):
	parser = argparse.ArgumentParser(description='Generate short identifiers.')
	parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
	parser.add_argument('-c', '--config', action='append',
			default=['/etc/' + __package__ + '/config.yaml', # system default
					os.path.expanduser ('~/.config/' + __package__ + '/config.yaml'), # user default
					],
			help='Configuration file')
	parser.add_argument('-f', '--format', default=Formatter.HUMAN,
			type=lambda x: Formatter[x.upper ()], help='Output format')
	parser.set_defaults (func=partial (doHelp, parser))
	subparsers = parser.add_subparsers ()

	parserProquint = subparsers.add_parser('proquint', help='Generate a proquint')
	parserProquint.add_argument('-l', '--length', type=int, help='Length in characters')
	parserProquint.add_argument('-s', '--seed', help='Seed for deterministic output, IPv4 addresses and small integers are encoded directly')
	parserProquint.add_argument('-g', '--group-size', dest='groupSize', type=int, help='Characters per group')
	parserProquint.set_defaults(func=doProquint, kind='proquint')

	parserCanonical = subparsers.add_parser('canonical', help='Encode a value as canonical proquint')
	parserCanonical.add_argument('-g', '--group-size', dest='groupSize', type=int, help='Characters per group')
	parserCanonical.add_argument('value', help='IPv4 address, unsigned integer or hexadecimal string')
	parserCanonical.set_defaults(func=doCanonical)

	parserNanoid = subparsers.add_parser('nanoid', help='Generate a NanoID')
	parserNanoid.add_argument('-l', '--length', type=int, help='Length in characters, including separators')
	parserNanoid.add_argument('-a', '--alphabet', help='alphanumeric, numeric, readable or a custom alphabet')
	parserNanoid.add_argument('-s', '--seed', help='Seed for deterministic, insecure output')
	parserNanoid.add_argument('-g', '--group-size', dest='groupSize', type=int, help='Characters per group')
	parserNanoid.set_defaults(func=doNanoid, kind='nanoid')

	parserWord = subparsers.add_parser('word', help='Pick a word')
	parserWord.add_argument('-s', '--seed', default='', help='Seed, the same seed always picks the same word')
	parserWord.add_argument('-w', '--wordlist', help='Comma-separated custom word list')
	parserWord.set_defaults(func=doWord)

	args = parser.parse_args(argv)
	logformat = '{message}'
	if args.verbose:
		logging.basicConfig (level=logging.DEBUG, format=logformat, style='{')
	else:
		logging.basicConfig (level=logging.INFO, format=logformat, style='{')

	# read config and merge with args
	applyConfig (args, loadConfig (args.config))

	try:
		return args.func (args)
	except IdgenException as e:
		logger.error (f'Cannot generate id: {e.args[0]}')
		formatResult (args, dict (status='invalid', message=e.args[0]), None)
		return 2

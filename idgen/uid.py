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

# see https://arxiv.org/html/0901.4016 on how to build proquints (human
# pronouncable unique ids)
import logging, secrets

from .stream import seededBytes
from .util import IdgenException

logger = logging.getLogger (__name__)

toConsonant = 'bdfghjklmnprstvz'
toVowel = 'aiou'
fromConsonant = dict ((c, i) for i, c in enumerate (toConsonant))
fromVowel = dict ((c, i) for i, c in enumerate (toVowel))

# values up to this one fit into the 32 bit canonical form
CANONICAL32_MAX = 0xffffffff

class InvalidQuint (IdgenException):
    pass

def u16ToQuint (v):
    """ Transform a 16 bit unsigned integer into a single quint """
    assert 0 <= v < 2**16
    # quints are “big-endian”
    return ''.join ([
            toConsonant[(v>>(4+2+4+2))&0xf],
            toVowel[(v>>(4+2+4))&0x3],
            toConsonant[(v>>(4+2))&0xf],
            toVowel[(v>>4)&0x3],
            toConsonant[(v>>0)&0xf],
            ])

def quintToU16 (q):
    """ Transform a single quint back into a 16 bit unsigned integer """
    if len (q) != 5:
        raise InvalidQuint (f'{q!r} is not a five letter quint')
    try:
        return (fromConsonant[q[0]]<<(4+2+4+2)) \
                | (fromVowel[q[1]]<<(4+2+4)) \
                | (fromConsonant[q[2]]<<(4+2)) \
                | (fromVowel[q[3]]<<4) \
                | fromConsonant[q[4]]
    except KeyError as e:
        raise InvalidQuint (f'{q!r} contains invalid letter {e.args[0]!r}') from None

def bytesToQuint (b, sep='-'):
    """ Encode each big-endian 16 bit halfword of b as one quint """
    if len (b) % 2 != 0:
        raise ValueError (f'Cannot encode odd number of bytes ({len (b)})')
    return sep.join (u16ToQuint ((b[i]<<8) | b[i+1]) for i in range (0, len (b), 2))

def quintToBytes (s, sep='-'):
    """ Decode quints, optionally separated by sep, into bytes """
    s = s.replace (sep, '')
    if len (s) % 5 != 0:
        raise InvalidQuint (f'{len (s)} letters is not a multiple of five')
    out = bytearray ()
    for i in range (0, len (s), 5):
        out.extend (quintToU16 (s[i:i+5]).to_bytes (2, 'big'))
    return bytes (out)

def quintToUint (s, sep='-'):
    return int.from_bytes (quintToBytes (s, sep), 'big')

def uintToQuint (v, length=2):
    """ Turn any integer into a proquint with fixed length """
    assert 0 <= v < 2**(length*16)

    return '-'.join (reversed ([u16ToQuint ((v>>(x*16))&0xffff) for x in range (length)]))

def canonicalBytes (value):
    """
    Big-endian representation of value using the smallest canonical width,
    i.e. four bytes up to 0xffffffff and eight bytes beyond.
    """
    if not 0 <= value < 2**64:
        raise ValueError (f'{value} is not an unsigned 64 bit integer')
    return value.to_bytes (4 if value <= CANONICAL32_MAX else 8, 'big')

def encodeCanonical (value):
    return bytesToQuint (canonicalBytes (value))

def encodeWithPadTruncate (value, byteLength):
    """
    Canonically encode value, but keep only the least significant byteLength
    bytes or pad with leading zero bytes up to byteLength.
    """
    b = canonicalBytes (value)
    if byteLength > 0 and byteLength != len (b):
        if byteLength < len (b):
            b = b[len (b)-byteLength:]
        else:
            b = bytes (byteLength-len (b)) + b
    return bytesToQuint (b)

def generateQuint (byteLength, seed=None, directEncode=False):
    """
    Create a proquint from byteLength bytes.

    With directEncode the seed itself is encoded (see encodeWithPadTruncate),
    a seed alone drives the deterministic byte stream and no seed at all
    draws from the operating system’s secure random source.
    """
    if seed is None:
        if byteLength % 2 != 0:
            raise ValueError (f'Cannot encode odd number of bytes ({byteLength})')
        return uintToQuint (secrets.randbelow (2**(byteLength*8)), byteLength//2)
    elif directEncode:
        # seeds are signed, but direct encoding only happens for uint32 values
        return encodeWithPadTruncate (seed & 0xffffffffffffffff, byteLength)
    else:
        logger.debug (f'using seeded byte stream for {byteLength} bytes')
        return bytesToQuint (seededBytes (seed, byteLength))

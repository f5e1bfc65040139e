from collections import namedtuple
import struct
import warnings

from bitsha1.utils import bits_to_int, take, words_to_hex
from ._compress import compress

__all__ = ['sha1_padding', 'sha1', 'Sha1Hash', 'Digest', 'IV', 'BLOCK_BITS', 'LENGTH_BITS']

IV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

BLOCK_BITS = 512
BLOCK_BYTES = BLOCK_BITS // 8

# Width of the message length field appended during padding
LENGTH_BITS = 64
MAX_LENGTH = 1 << LENGTH_BITS


def _words(block):
    return struct.unpack('>16I', block.to_bytes(BLOCK_BYTES, 'big'))


def sha1_padding(bit_length):
    """Create the SHA1 padding for a message of the given length

    The padding is a single `1` bit, `0` bits up to 448 (mod 512) and the
    message length as 64-bit big-endian number.

    ```python3
    >>> sha1_padding(424) == ((1 << 87) | 424, 88)
    True
    >>> sha1_padding(447)[1]
    65
    >>> sha1_padding(448)[1]
    576

    ```

    Arguments:
        bit_length {int} -- The length of the message in bits

    Returns:
        (int, int) -- The padding bits packed into an integer and their count
    """
    zeros = (BLOCK_BITS - LENGTH_BITS - 1 - bit_length) % BLOCK_BITS
    value = (1 << (zeros + LENGTH_BITS)) | (bit_length % MAX_LENGTH)
    return value, 1 + zeros + LENGTH_BITS


class Digest(namedtuple('Digest', ['a', 'b', 'c', 'd', 'e'])):
    r"""The 160-bit result of SHA1, five 32-bit words read big-endian

    ```python
    >>> d = Digest(0xda39a3ee, 0x5e6b4b0d, 0x3255bfef, 0x95601890, 0xafd80709)
    >>> d.hexdigest()
    'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    >>> d.digest()[:4]
    b'\xda9\xa3\xee'
    >>> int(d) >> 128 == 0xda39a3ee
    True

    ```
    """
    __slots__ = ()

    def hexdigest(self):
        return words_to_hex(self)

    def digest(self):
        return struct.pack('>5I', *self)

    def __int__(self):
        return int(self.hexdigest(), 16)

    def __str__(self):
        return self.hexdigest()


class Sha1Hash(object):
    r"""Represents the state of the SHA1 hashing algorithm on a stream of bits.

    Messages do not need to be a whole number of bytes: `add()` accepts any
    sequence of bits and `update()` any bytes-like object, in any mix and at
    any alignment. Bits which do not yet form a full block of 512 bits are
    kept packed in an integer.

    `finalize()` returns the digest and resets the object, so it can be used
    for the next message right away.

    Usage:
    ```python3
    >>> h = Sha1Hash()
    >>> h.update(b'sha')
    >>> h.finalize().hexdigest()
    'd8f4590320e1343a915b6394170650a8f35d6926'
    >>> h.add([False, True, False, True])
    >>> h.add([False, False, True, True, False, True, True, False])
    >>> h.add([True, False, False, False, False, True, True, False])
    >>> h.add([False, False, False, True])
    >>> h.bit_length
    24
    >>> h.finalize().hexdigest()
    'ba79baeb9f10896a46ae74715271b7f586e74640'
    >>> h.finalize().hexdigest()
    'da39a3ee5e6b4b0d3255bfef95601890afd80709'

    ```
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Drop all data fed so far and restore the initial state"""
        self.h = IV
        self._pending = 0
        self._pending_bits = 0
        self._bit_length = 0

    @property
    def bit_length(self):
        """Number of message bits fed since construction or the last reset"""
        return self._bit_length

    def copy(self):
        """Return an independent copy of this hash object

        ```python
        >>> h = Sha1Hash()
        >>> h.update(b'Hello ')
        >>> g = h.copy()
        >>> g.update(b'World!')
        >>> g.finalize() == sha1(b'Hello World!')
        True
        >>> h.bit_length
        48

        ```
        """
        other = Sha1Hash()
        other.h = self.h
        other._pending = self._pending
        other._pending_bits = self._pending_bits
        other._bit_length = self._bit_length
        return other

    def add(self, bits):
        """Update the internal state with the given bits

        Arguments:
            bits {iterable} -- The bits to feed into the hash, first bit first. Any truthy value is a `1`.
        """
        for part in take(bits, BLOCK_BITS):
            self._ingest(*bits_to_int(part))

    def update(self, byteslike):
        """Update the internal state with the given bytes-like object

        This is the same as `add(bytes_to_bits(byteslike))`.

        Arguments:
            byteslike {bytes} -- The data to feed into the hash
        """
        data = bytes(byteslike)
        for i in range(0, len(data), BLOCK_BYTES):
            piece = data[i:i+BLOCK_BYTES]
            self._ingest(int.from_bytes(piece, 'big'), len(piece) * 8)

    def _ingest(self, value, nbits):
        before = self._bit_length
        self._bit_length += nbits
        if before < MAX_LENGTH <= self._bit_length:
            warnings.warn(
                f"Message length exceeds {LENGTH_BITS} bits of length field. The digest will not be standard SHA1!",
                RuntimeWarning,
                stacklevel=3
            )

        total = self._pending_bits + nbits
        if total < BLOCK_BITS:
            self._pending = (self._pending << nbits) | value
            self._pending_bits = total
            return

        # fill up the pending block first, then consume the input directly
        rest = total - BLOCK_BITS
        self.h = compress(self.h, _words((self._pending << (nbits - rest)) | (value >> rest)))
        value &= (1 << rest) - 1

        while rest >= BLOCK_BITS:
            rest -= BLOCK_BITS
            self.h = compress(self.h, _words(value >> rest))
            value &= (1 << rest) - 1

        self._pending = value
        self._pending_bits = rest

    def finalize(self):
        """Pad the message, compute its digest and reset the hash object.

        A second call without feeding new data in between returns the digest
        of the empty message.

        Returns:
            Digest -- The 160-bit digest of the data fed so far
        """
        padding, padding_bits = sha1_padding(self._bit_length)
        tail = (self._pending << padding_bits) | padding
        tail_bits = self._pending_bits + padding_bits
        assert (tail_bits in (BLOCK_BITS, 2 * BLOCK_BITS))

        h = self.h
        if tail_bits > BLOCK_BITS:
            h = compress(h, _words(tail >> BLOCK_BITS))
            tail &= (1 << BLOCK_BITS) - 1
        h = compress(h, _words(tail))

        self.reset()

        return Digest(*h)


def sha1(data=None):
    r"""Initialize a new SHA1 hash object or quickly generate a SHA1 hash

    Example:
    ```python
    >>> h = sha1()
    >>> h.update(b'Hello World!')
    >>> h.finalize().hexdigest()
    '2ef7bde608ce5404e97d5f042f95f89f1c232871'

    ```
    Or quickly generate a SHA1 hash if the hash object is not needed:
    ```python
    >>> sha1(b'Hello World!').hexdigest()
    '2ef7bde608ce5404e97d5f042f95f89f1c232871'

    ```

    Returns:
        Sha1Hash or Digest -- A new SHA1 hash object or a SHA1 digest if data was provided
    """
    h = Sha1Hash()
    if data is None:
        return h

    h.update(data)
    return h.finalize()

__all__ = ['rol', 'compress', 'K', 'MASK32']

MASK32 = 0xffffffff

# Round constants, one per group of 20 rounds
K = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def rol(x, n):
    """Performs bitwise left rotation on 32-bit numbers

    The rotation amount is taken modulo 32.

    ```python
    >>> rol(1 << 31, 1)
    1
    >>> rol((1 << 31) + 1, 2)
    6
    >>> rol(0x12345678, 32)
    305419896
    >>> rol(0x12345678, 36) == rol(0x12345678, 4)
    True

    ```
    """
    n %= 32
    return ((x << n) | (x >> (32 - n))) & MASK32


def expand(w):
    """Extend the 16 words of a block to the 80 word message schedule

    Arguments:
        w {sequence} -- The 16 32-bit words of the block

    Returns:
        list -- The 80 words of the message schedule
    """
    w = list(w)
    for i in range(16, 80):
        w.append(rol(w[i-3] ^ w[i-8] ^ w[i-14] ^ w[i-16], 1))
    return w


def compress(h, w):
    """Calculate the next state from one block of 512 bits using the state `h`

    ```python
    >>> from bitsha1.hashing._sha1 import IV
    >>> block = [0x80000000] + [0] * 15
    >>> '%08x' % compress(IV, block)[0]
    'da39a3ee'

    ```

    Arguments:
        h {tuple} -- A 5-tuple of 32-bit integers, the running state
        w {sequence} -- Exactly 16 32-bit integers, the block in big-endian words

    Returns:
        tuple -- A 5-tuple of 32-bit integers, the updated state
    """

    assert (len(w) == 16)

    w = expand(w)

    a, b, c, d, e = h

    for i in range(80):
        if i < 20:
            f = (b & c) | (~b & d)
        elif i < 40:
            f = b ^ c ^ d
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
        else:
            f = b ^ c ^ d

        tmp = (e + rol(a, 5) + f + w[i] + K[i // 20]) & MASK32
        a, b, c, d, e = tmp, a, rol(b, 30), c, d

    return (
        (h[0] + a) & MASK32,
        (h[1] + b) & MASK32,
        (h[2] + c) & MASK32,
        (h[3] + d) & MASK32,
        (h[4] + e) & MASK32,
    )

from itertools import islice

__all__ = ['bytes_to_bits', 'bits_to_int', 'words_to_hex', 'take']


def bytes_to_bits(byteslike):
    r"""Expand the given bytes into individual bits, most significant bit first

    Example:
    ```python
    >>> bytes_to_bits(b'\xa0')
    [True, False, True, False, False, False, False, False]
    >>> len(bytes_to_bits(b'sha'))
    24

    ```

    Arguments:
        byteslike {bytes} -- The data to expand

    Returns:
        list of bool -- The bits of `byteslike` in input order
    """
    return [bool((x >> i) & 1) for x in bytes(byteslike) for i in range(7, -1, -1)]


def bits_to_int(bits):
    """Pack an iterable of bits into a big-endian integer

    The first bit becomes the most significant one. Any truthy value counts as
    a set bit.

    Example:
    ```python
    >>> bits_to_int([1, 0, 1])
    (5, 3)
    >>> bits_to_int([False, False, True])
    (1, 3)
    >>> bits_to_int([])
    (0, 0)

    ```

    Arguments:
        bits {iterable} -- The bits to pack

    Returns:
        (int, int) -- The packed value and the number of bits it holds
    """
    value = 0
    n = 0
    for bit in bits:
        value = (value << 1) | (1 if bit else 0)
        n += 1
    return value, n


def words_to_hex(words):
    """Render a sequence of 32-bit words as lowercase hexadecimal

    Example:
    ```python
    >>> words_to_hex([0xda39a3ee, 0x5e6b4b0d])
    'da39a3ee5e6b4b0d'
    >>> words_to_hex([1, 0xff])
    '00000001000000ff'

    ```

    Arguments:
        words {iterable} -- Iterable of 32-bit integers

    Returns:
        str -- 8 hex digits per word, big-endian
    """
    return ''.join(f'{w:08x}' for w in words)


def take(iterable, n):
    """Generator to yield lists of at most `n` consecutive elements

    Unlike a zip based chunking the last list is not filled up, it is simply
    shorter.

    Example:
    ```python
    >>> list(take([1, 2, 3, 4, 5], 2))
    [[1, 2], [3, 4], [5]]
    >>> list(take([], 3))
    []

    ```

    Arguments:
        iterable {iterable} -- The iterable to drain
        n {int} -- The maximum size of each list

    Yields:
        list -- Up to `n` elements from `iterable`
    """
    it = iter(iterable)
    part = list(islice(it, n))
    while part:
        yield part
        part = list(islice(it, n))

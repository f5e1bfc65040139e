"""Cross-check the bit oriented SHA1 against an independent implementation.

The reference digests are computed with the SHA1 of the `cryptography`
package. Messages are fed to our implementation one bit at a time through
`Sha1Hash.add()`, so the comparison also covers the bit level interface.
"""

from collections import namedtuple
import logging
import sys

from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

from bitsha1.hashing import Sha1Hash
from bitsha1.utils import bytes_to_bits

__all__ = ['reference_sha1', 'compare', 'main', 'Comparison', 'DEMO_MESSAGES']

log = logging.getLogger(__name__)

DEMO_MESSAGES = [
    b'hello world!',
    b'123',
    b'hi1sdogih3289qp3uopa;jfhpg7t9q2a;holfp9t8t3q2[09gha;oishdgaodshgvna'
    b'09ewyty3w96ythwgiihd;fasgy3982hlahdgaw8wtyghw09y3thsf983hw89ghs',
    b'',
]


class Comparison(namedtuple('Comparison', ['message', 'ours', 'reference'])):
    __slots__ = ()

    @property
    def match(self):
        return self.ours == self.reference


def reference_sha1(data):
    """Compute the hex SHA1 digest of `data` using `cryptography`

    Example:
    ```python
    >>> reference_sha1(b'sha')
    'd8f4590320e1343a915b6394170650a8f35d6926'

    ```

    Arguments:
        data {bytes} -- The message to hash

    Returns:
        str -- 40 lowercase hex characters
    """
    h = hashes.Hash(hashes.SHA1(), default_backend())
    h.update(bytes(data))
    return h.finalize().hex()


def compare(message):
    """Hash `message` with both implementations

    Example:
    ```python
    >>> c = compare('Sha')
    >>> c.ours
    'ba79baeb9f10896a46ae74715271b7f586e74640'
    >>> c.match
    True

    ```

    Arguments:
        message {bytes or str} -- The message. Strings are UTF-8 encoded.

    Returns:
        Comparison -- The message and both hex digests
    """
    if isinstance(message, str):
        message = message.encode('utf-8')

    h = Sha1Hash()
    h.add(bytes_to_bits(message))
    result = Comparison(message, h.finalize().hexdigest(), reference_sha1(message))

    if not result.match:
        log.warning("Digest mismatch for %r: %s != %s", message, result.ours, result.reference)

    return result


def main(argv=None):
    """Print our and the reference digest for every message given

    Without arguments a few built-in messages are used.

    Returns:
        int -- 0 if all digests match, 1 otherwise
    """
    if argv is None:
        argv = sys.argv[1:]

    messages = argv if argv else DEMO_MESSAGES

    ok = True
    for m in messages:
        c = compare(m)
        print(f"Message = {c.message.decode('utf-8', 'replace')}")
        print(f"{c.reference} - result of reference SHA-1 (cryptography)")
        print(f"{c.ours} - result of bitsha1")
        print()
        ok = ok and c.match

    return 0 if ok else 1

from ._compress import compress, rol
from ._sha1 import sha1, sha1_padding, Sha1Hash, Digest, IV

__all__ = ["compress", "rol", "sha1", "sha1_padding", "Sha1Hash", "Digest", "IV"]

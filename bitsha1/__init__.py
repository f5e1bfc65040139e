from . import compare, hashing, utils
from .hashing import sha1, Sha1Hash, Digest

__all__ = ["compare", "hashing", "utils", "sha1", "Sha1Hash", "Digest"]

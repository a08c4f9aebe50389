"""T0.01 — Digest Expansion.

MD5 the UTF-8 encoded input and expose the 16 digest bytes as ints 0..255,
in the digest's natural byte order. Lone surrogates are encoded as-is
(surrogatepass) so every Python str hashes.
"""

from __future__ import annotations

import hashlib

from identicon.engine.context import Image
from identicon.engine.registry import Layer, transform


def hash_input(text: str) -> list[int]:
    """Return the MD5 digest of ``text`` as a list of 16 ints.

    >>> hash_input("hello world!")[:3]
    [252, 63, 249]
    """
    return list(hashlib.md5(text.encode("utf-8", "surrogatepass")).digest())


@transform(
    id="T0.01",
    layer=Layer.DIGEST,
    description="Hash the input into 16 digest bytes",
)
def digest_expansion(image: Image) -> None:
    image.hex = hash_input(image.input)

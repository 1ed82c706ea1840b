"""
Label identity digest.

A label is content-addressed by its scope and name: the same
(project, repository, name) triple always yields the same hex digest, in
every process, so the digest can back a storage uniqueness constraint.
"""

import hashlib

from prlabels.constants import LABEL_HASH_ALGORITHM, LABEL_HASH_DELIMITER
from prlabels.exceptions import HashingUnavailableException


def _new_digest(data=b""):
    try:
        return hashlib.new(LABEL_HASH_ALGORITHM, data)
    except (ValueError, TypeError) as e:
        raise HashingUnavailableException(f"unable to encode label hash with {LABEL_HASH_ALGORITHM}: {e}") from e


def ensure_hashing_available():
    """Fail fast when the digest algorithm is missing from this interpreter."""
    _new_digest()


def label_token(project_id, repository_id, name):
    return LABEL_HASH_DELIMITER.join([str(project_id), str(repository_id), name])


def label_hash(project_id, repository_id, name):
    """Return the lowercase hex identity digest of a scoped label name.

    Name is hashed literally: no case folding or whitespace stripping.
    """
    token = label_token(project_id, repository_id, name)
    return _new_digest(token.encode("utf-8")).hexdigest()

import hashlib


def file_checksum(content: bytes) -> str:
    """Compute the SHA3-512 hex digest used to deduplicate binary assets."""
    return hashlib.sha3_512(content).hexdigest()

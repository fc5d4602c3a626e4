import hashlib

from catalog.checksum import file_checksum


class TestFileChecksum:
    def test_same_content_produces_same_checksum(self):
        assert file_checksum(b'image-bytes') == file_checksum(b'image-bytes')

    def test_different_content_produces_different_checksum(self):
        assert file_checksum(b'image-bytes') != file_checksum(b'image-bytez')

    def test_checksum_is_sha3_512_hex(self):
        checksum = file_checksum(b'abc')
        assert len(checksum) == 128
        assert checksum == hashlib.sha3_512(b'abc').hexdigest()

    def test_empty_content_has_a_checksum(self):
        assert len(file_checksum(b'')) == 128

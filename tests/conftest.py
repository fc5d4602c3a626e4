import io
import struct
import zlib

import pytest
from PIL import Image

from catalog.signals import generate_thumbnails


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / 'media')
    settings.FEED_USER_AGENT = 'catalog-tests'
    return tmp_path / 'media'


@pytest.fixture()
def png_bytes():
    """Build a PNG of the given size and colour."""
    def _make(size=(1000, 600), color=(200, 30, 30)):
        buf = io.BytesIO()
        Image.new('RGB', size, color).save(buf, format='PNG')
        return buf.getvalue()
    return _make


@pytest.fixture()
def thumbnail_events():
    """Collect every GenerateThumbnailsEvent sent while the test runs."""
    events = []

    def _collect(sender, event, **kwargs):
        events.append(event)

    generate_thumbnails.connect(_collect, dispatch_uid='test-collector')
    yield events
    generate_thumbnails.disconnect(dispatch_uid='test-collector')


@pytest.fixture()
def oversized_png():
    """A tiny PNG whose header claims far more pixels than Pillow will open."""
    def _chunk(kind, data):
        crc = zlib.crc32(kind + data) & 0xffffffff
        return struct.pack('>I', len(data)) + kind + data + struct.pack('>I', crc)

    header = struct.pack('>IIBBBBB', 20000, 20000, 8, 2, 0, 0, 0)
    return (
        b'\x89PNG\r\n\x1a\n'
        + _chunk(b'IHDR', header)
        + _chunk(b'IDAT', zlib.compress(b'\x00'))
        + _chunk(b'IEND', b'')
    )

from pytest import raises

from vendorstatic.utils import sniff_content_type


def test_sniff_images():

    assert sniff_content_type(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR") == "image/png"
    assert sniff_content_type(b"\xff\xd8\xff\xe0\x00\x10JFIF") == "image/jpeg"
    assert sniff_content_type(b"GIF89a\x01\x00\x01\x00") == "image/gif"
    assert sniff_content_type(b"GIF87a\x01\x00\x01\x00") == "image/gif"
    assert sniff_content_type(b"RIFF\x24\x00\x00\x00WEBPVP8 ") == "image/webp"
    assert sniff_content_type(b"\x00\x00\x01\x00\x01\x00\x10\x10") == (
        "image/vnd.microsoft.icon"
    )
    assert sniff_content_type(b"II*\x00\x08\x00") == "image/tiff"
    bmp = b"BM" + b"\x36\x00\x0c\x00" + b"\x00" * 30
    assert sniff_content_type(bmp) == "image/bmp"


def test_sniff_fonts():

    assert sniff_content_type(b"wOFF\x00\x01\x00\x00") == "font/woff"
    assert sniff_content_type(b"wOF2\x00\x01\x00\x00") == "font/woff2"
    assert sniff_content_type(b"\x00\x01\x00\x00\x00\x0f\x00\x80") == "font/ttf"
    assert sniff_content_type(b"OTTO\x00\x0b\x00\x80\x00\x03") == "font/otf"
    eot = b"\x10\x27\x00\x00" + b"\x00" * 30 + b"LP" + b"\x00" * 10
    assert sniff_content_type(eot) == "application/vnd.ms-fontobject"


def test_sniff_text():

    svg = b'<?xml version="1.0"?>\n<svg xmlns="http://www.w3.org/2000/svg"></svg>'
    assert sniff_content_type(svg) == "image/svg+xml"
    assert sniff_content_type(b"  <svg></svg>") == "image/svg+xml"
    svg = b"<!-- Generator: x -->\n<svg viewBox=\"0 0 1 1\"></svg>"
    assert sniff_content_type(svg) == "image/svg+xml"
    svg = b"<?xml version=\"1.0\"?>\n<!-- a -->\n  <!-- b -->\n<svg></svg>"
    assert sniff_content_type(svg) == "image/svg+xml"
    assert sniff_content_type(b"<!-- unterminated <svg>") == "text/plain"
    assert sniff_content_type(b'<?xml version="1.0"?><foo/>') == "text/plain"

    assert sniff_content_type(b"<!DOCTYPE html><html></html>") == "text/html"
    assert sniff_content_type(b"<html>x</html>") == "text/html"

    assert sniff_content_type(b'{"foo": 42}') == "application/json"
    assert sniff_content_type(b"[1, 2, 3]") == "application/json"
    assert sniff_content_type(b"{not json") == "text/plain"

    assert sniff_content_type(b"body { color: red; }") == "text/plain"
    assert sniff_content_type("hello") == "text/plain"
    assert sniff_content_type(b"") == "text/plain"

    # Ascii signatures are not trusted for text
    assert sniff_content_type(b"true") == "text/plain"
    assert sniff_content_type(b"OTTO was here") == "text/plain"
    assert sniff_content_type(b"BMW" + b" is a car brand, in many countries") == (
        "text/plain"
    )


def test_sniff_binary():

    assert sniff_content_type(bytes([0xFE, 0xFF, 0x00, 0x80])) == (
        "application/octet-stream"
    )
    assert sniff_content_type(b"abc\x00def") == "application/octet-stream"

    with raises(TypeError):
        sniff_content_type(42)


if __name__ == "__main__":
    test_sniff_images()
    test_sniff_fonts()
    test_sniff_text()
    test_sniff_binary()

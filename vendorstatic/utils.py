"""
Some utilities for common tasks.
"""

import json

__all__ = ["sniff_content_type", "MAGIC_NUMBERS"]


# (prefix, content-type) pairs, checked in order
MAGIC_NUMBERS = [
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x00\x00\x01\x00", "image/vnd.microsoft.icon"),
    (b"II*\x00", "image/tiff"),
    (b"MM\x00*", "image/tiff"),
    (b"wOFF", "font/woff"),
    (b"wOF2", "font/woff2"),
    (b"\x00\x01\x00\x00", "font/ttf"),
    (b"%PDF-", "application/pdf"),
]

# Signatures that are plain ascii, only trusted when the body is not text
BINARY_MAGIC_NUMBERS = [
    (b"true", "font/ttf"),
    (b"OTTO", "font/otf"),
    (b"BM", "image/bmp"),
]


def sniff_content_type(body):
    """ Guess the content-type based on the bytes of the body, i.e. by
    looking at magic numbers rather than at a filename extension.

    * Known binary formats (png, jpeg, gif, bmp, webp, ico, tiff, woff,
      woff2, ttf, otf, eot, pdf) by their signature.
    * "image/svg+xml" for xml text with an svg root element.
    * "text/html" for text starting with ``<!DOCTYPE html>`` or ``<html``.
    * "application/json" for text that parses as a JSON object or array.
    * "text/plain" for other utf-8 text.
    * "application/octet-stream" otherwise.
    """
    if isinstance(body, str):
        body = body.encode()
    elif not isinstance(body, bytes):
        raise TypeError(f"Can only sniff bytes or str, not {type(body)}.")

    for prefix, ctype in MAGIC_NUMBERS:
        if body.startswith(prefix):
            return ctype
    if body[:4] == b"RIFF" and body[8:12] == b"WEBP":
        return "image/webp"

    try:
        text = body.decode("utf-8-sig")
    except UnicodeDecodeError:
        text = None

    if text is None or "\x00" in text:
        for prefix, ctype in BINARY_MAGIC_NUMBERS:
            if body.startswith(prefix):
                return ctype
        if body[34:36] == b"LP":  # eot magic follows its header fields
            return "application/vnd.ms-fontobject"
        return "application/octet-stream"

    head = _skip_xml_preamble(text[:4096]).lower()
    if head.startswith(("<svg", "<!doctype svg")):
        return "image/svg+xml"
    elif head.startswith(("<!doctype html", "<html")):
        return "text/html"
    elif head.startswith(("{", "[")):
        try:
            json.loads(text)
        except ValueError:
            return "text/plain"
        return "application/json"
    else:
        return "text/plain"


def _skip_xml_preamble(text):
    """ Strip leading whitespace, the xml declaration, and comments.
    """
    while True:
        text = text.lstrip()
        if text.startswith("<?xml"):
            terminator = "?>"
        elif text.startswith("<!--"):
            terminator = "-->"
        else:
            return text
        end = text.find(terminator)
        if end < 0:
            return text
        text = text[end + len(terminator) :]

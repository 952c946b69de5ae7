import codecs
import contextlib
import os

ENCODING = "utf-8"


def source_name(source):
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return getattr(source, "name", "<stream>")


def _decoded_lines(handle, encoding):
    # decoded one line at a time so a bad byte is reported on its own line
    for index, raw in enumerate(handle):
        if index == 0 and raw.startswith(codecs.BOM_UTF8):
            raw = raw[len(codecs.BOM_UTF8):]
        yield raw.decode(encoding)


@contextlib.contextmanager
def open_source(source, *, encoding=ENCODING):
    """Yield an iterable of lines for a path or an already open text stream.

    Files opened here are closed on every exit path. A leading UTF-8 byte
    order mark is dropped. Streams passed in belong to the caller and are
    left open.
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as handle:
            yield _decoded_lines(handle, encoding)
    else:
        yield source

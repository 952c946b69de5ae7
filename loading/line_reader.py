from loading.errors import Diagnostic, ErrorKind, LoadError
from loading.text import parse_count, trim


class LineReader:
    """Hands out trimmed lines of a text source together with their 1-based line numbers"""
    def __init__(self, lines, *, source_name=None):
        self._lines = iter(lines)
        self.source_name = source_name
        self.line_number = 0
        self.line = None

    def next_line(self):
        """Next trimmed line (possibly empty), or None at end of input"""
        try:
            raw = next(self._lines)
        except StopIteration:
            self.line = None
            return None
        except UnicodeDecodeError as error:
            raise LoadError(
                kind=ErrorKind.INVALID_ENCODING,
                message=(
                    f"Line is not valid {error.encoding}: "
                    f"byte 0x{error.object[error.start]:02x} at offset {error.start}"
                ),
                source_name=self.source_name,
                line_number=self.line_number + 1,
            ) from error
        self.line_number += 1
        self.line = trim(raw)
        return self.line

    def next_non_blank(self):
        """Next line with content, skipping blank ones, or None at end of input"""
        while True:
            line = self.next_line()
            if line is None or line:
                return line

    def remaining_non_blank(self):
        while True:
            line = self.next_non_blank()
            if line is None:
                return
            yield self.line_number, line


def read_declared_count(reader, *, source_name, entry_label):
    """Read the header line holding how many entries the file declares"""
    line = reader.next_line()
    if line is None:
        raise LoadError(
            kind=ErrorKind.UNEXPECTED_EOF,
            message=f"Empty {entry_label} file, expected the number of {entry_label} on the first line",
            source_name=source_name,
            line_number=1,
        )
    try:
        return parse_count(line)
    except ValueError:
        raise LoadError(
            kind=ErrorKind.INVALID_COUNT,
            message=f"Invalid number of {entry_label}",
            source_name=source_name,
            line_number=reader.line_number,
            line=line,
        ) from None


def next_entry_line(reader, *, source_name, entry_label, expected, read):
    line = reader.next_non_blank()
    if line is None:
        raise LoadError(
            kind=ErrorKind.UNEXPECTED_EOF,
            message=f"Unexpected end of file: expected {expected} {entry_label}, read {read}",
            source_name=source_name,
            line_number=reader.line_number,
        )
    return line


def count_mismatch(*, expected, surplus_line_numbers, source_name, entry_label):
    return Diagnostic(
        kind=ErrorKind.COUNT_MISMATCH,
        message=(
            f"Expected {expected} {entry_label} but found {expected + len(surplus_line_numbers)}; "
            f"only the first {expected} were loaded"
        ),
        source_name=source_name,
        line_number=surplus_line_numbers[0],
    )

"""A dense matrix of counters with an optional cumulative form."""


class CountMatrix:
    """Counters laid out in lines and columns, all starting at zero."""

    def __init__(self, nlines, ncolumns):
        if nlines < 0 or ncolumns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._nlines = nlines
        self._ncolumns = ncolumns
        self._rows = [[0] * ncolumns for _ in range(nlines)]

    @property
    def nlines(self):
        return self._nlines

    @property
    def ncolumns(self):
        return self._ncolumns

    def _check_line(self, line):
        if not 0 <= line < self._nlines:
            raise IndexError(f"line {line} out of range")

    def increment(self, line, column):
        """Add one to the counter at (line, column)."""
        self._check_line(line)
        if not 0 <= column < self._ncolumns:
            raise IndexError(f"column {column} out of range")
        self._rows[line][column] += 1

    def accumulate(self):
        """Turn every line into the running sum of itself and all lines above it."""
        for previous, current in zip(self._rows, self._rows[1:]):
            current[:] = [a + b for a, b in zip(previous, current)]

    def line(self, index):
        """Return the counters of one line as a tuple."""
        self._check_line(index)
        return tuple(self._rows[index])
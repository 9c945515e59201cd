class WavefrontError(RuntimeError):
    """Base class for every failure of the lex/parse/compile pipeline.

    Carries the location of the offending token or statement when known.
    """

    def __init__(self, message, line=None, column=None, source=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.source = source

    def locate(self, line, column):
        if self.line is None:
            self.line = line
            self.column = column
        return self

    def __str__(self):
        location = [str(x) for x in (self.source, self.line, self.column) if x is not None]
        if len(location) <= 0:
            return self.message
        return '%s: %s' % (':'.join(location), self.message)


class ParseError(WavefrontError):
    pass


class CompileError(WavefrontError):
    pass


class MissingPositionError(CompileError, ValueError):
    pass


class IndexOutOfRangeError(CompileError, IndexError):
    pass


class FormatChangeError(CompileError):
    pass

class RhoError(ValueError):
    pass


class ParseError(RhoError):
    def __init__(self, path, line_number, line, reason):
        self.path = path
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f'{path}, line {line_number}: {reason}: {line.rstrip()}')


class UnknownReferenceError(RhoError):
    def __init__(self, chrom, source=None):
        self.chrom = chrom
        message = f'reference {chrom} is not in the reference length table'
        if source:
            path, line_number, line = source
            message = f'{path}, line {line_number}: {message}: {line.rstrip()}'
        super().__init__(message)


class DuplicateReferenceError(RhoError):
    def __init__(self, chrom, index):
        self.chrom = chrom
        self.index = index
        super().__init__(f'reference {chrom} appears again at partition interval {index} after other references')


class OutOfOrderError(RhoError):
    pass


class InvalidQueryError(RhoError):
    pass

import gzip

from rho_between_snps.errors import ParseError

# first column of a header line, compared lower case
HEADER_NAMES = {'chr', 'chrom', 'chromosome', 'seqname', 'contig'}


def open_text(path):
    return gzip.open(path, 'rt') if str(path).endswith('.gz') else open(path, 'rt')


def is_header(columns):
    return columns[0].strip().lower() in HEADER_NAMES and (len(columns) < 2 or not _is_int(columns[1]))


def iter_records(path, min_fields):
    """Yield (line_number, line, columns) for every data line of a tab separated file.

    Blank lines and '#' comments are skipped, and so is a leading header line
    starting with CHR, chrom or a similar column name.
    """
    seen_data = False
    with open_text(path) as f:
        for line_number, line in enumerate(f, start=1):
            if not line.strip() or line.startswith('#'):
                continue
            columns = line.rstrip('\r\n').split('\t')
            if not seen_data and is_header(columns):
                seen_data = True
                continue
            seen_data = True
            if len(columns) < min_fields:
                raise ParseError(path, line_number, line, f'expected at least {min_fields} columns, found {len(columns)}')
            yield line_number, line, columns


def _is_int(text):
    try:
        int(text)
    except ValueError:
        return False
    return True

from collections import namedtuple

from rho_between_snps.errors import OutOfOrderError, ParseError, UnknownReferenceError
from rho_between_snps.range_rho import compute_rho, is_missing
from rho_between_snps.text_files import iter_records

# source is (path, line_number, line) when the marker was read from a file
Marker = namedtuple('Marker', ['chrom', 'pos', 'source'], defaults=[None])

RhoPair = namedtuple('RhoPair', ['chrom', 'start', 'end', 'rho'])


def iter_markers(snp_path):
    for line_number, line, columns in iter_records(snp_path, 2):
        chrom = columns[0].strip()
        if not chrom:
            raise ParseError(snp_path, line_number, line, 'empty reference name')
        try:
            pos = int(columns[1])
        except ValueError:
            raise ParseError(snp_path, line_number, line, 'position must be an integer')
        yield Marker(chrom, pos, (snp_path, line_number, line))


def run_marker_pairs(markers, partition, index, reference_lengths):
    """Pair every marker with the previous one on its reference.

    The first marker of a reference is paired with position 1 of that reference.
    """
    previous_chrom = None
    previous_pos = None
    for marker in markers:
        if marker.chrom not in reference_lengths:
            raise UnknownReferenceError(marker.chrom, marker.source)
        if marker.chrom != previous_chrom:
            previous_chrom = marker.chrom
            previous_pos = 1
        if marker.pos <= previous_pos:
            where = f' ({marker.source[0]}, line {marker.source[1]})' if marker.source else ''
            raise OutOfOrderError(f'marker {marker.chrom}:{marker.pos} is not after the previous position '
                                  f'{previous_chrom}:{previous_pos}{where}')
        rho = compute_rho(partition, index, previous_chrom, previous_pos, marker.chrom, marker.pos)
        yield RhoPair(marker.chrom, previous_pos, marker.pos, rho)
        previous_pos = marker.pos


def format_rho(rho):
    return 'NA' if is_missing(rho) else str(rho)


def write_rho_pairs(pairs, handle):
    n = 0
    for pair in pairs:
        handle.write(f'{pair.chrom}\t{pair.start}\t{pair.end}\t{format_rho(pair.rho)}\n')
        n += 1
    return n

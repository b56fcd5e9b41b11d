import sys

import numpy as np

from rho_between_snps.errors import InvalidQueryError
from rho_between_snps.rho_partition import MISSING


def is_missing(value):
    return value is None or bool(np.isnan(value))


def _is_unset(chrom, pos):
    return not chrom and not pos


def compute_rho(partition, index, chrom_a, pos_a, chrom_b, pos_b):
    """Length weighted mean rho over [pos_a, pos_b] of one reference.

    Returns MISSING (NaN) when one endpoint is unset, when the endpoints lie on
    different references or when any interval touched by the range has no rho.
    """
    a_unset = _is_unset(chrom_a, pos_a)
    b_unset = _is_unset(chrom_b, pos_b)
    if a_unset and b_unset:
        raise InvalidQueryError('both query endpoints are unset')
    if a_unset or b_unset:
        print(f'WARNING: query {chrom_a}:{pos_a} - {chrom_b}:{pos_b} has an unset endpoint, rho is NA', file=sys.stderr)
        return MISSING
    if chrom_a != chrom_b:
        return MISSING
    if pos_a >= pos_b:
        raise InvalidQueryError(f'query start {chrom_a}:{pos_a} is not before its end {chrom_b}:{pos_b}')
    if chrom_a not in index:
        raise InvalidQueryError(f'reference {chrom_a} has no intervals')

    chroms, starts, ends, rhos = partition.chroms, partition.starts, partition.ends, partition.rhos
    n = len(partition)

    def check_inside(i, pos):
        if i >= n or chroms[i] != chrom_a or pos < starts[i]:
            raise InvalidQueryError(f'position {chrom_a}:{pos} is outside the reference')

    # first interval: start <= pos_a < end
    first = index[chrom_a]
    check_inside(first, pos_a)
    while not pos_a < ends[first]:
        first += 1
        check_inside(first, pos_a)

    # last interval: start < pos_b <= end
    last = first
    while not pos_b <= ends[last]:
        last += 1
        check_inside(last, pos_b)

    covered = slice(first, last + 1)
    if np.isnan(rhos[covered]).sum() > 0:
        return MISSING

    # bases of each interval inside the range, first and last ones cropped
    overlap_start = np.maximum(starts[covered], pos_a)
    overlap_end = np.minimum(ends[covered], pos_b)
    size_bp = overlap_end - overlap_start
    return float(np.sum(size_bp * rhos[covered]) / (pos_b - pos_a))

import sys
from collections import namedtuple

import numpy as np
import pandas as pd

from rho_between_snps.errors import ParseError, UnknownReferenceError
from rho_between_snps.text_files import iter_records

MISSING = np.nan
MISSING_TOKENS = {'', 'NA', 'nan', 'NaN'}

# rho/NA is the 7th column, columns 4-6 are not used here
RHO_COLUMN = 6

# source is (path, line_number, line) when the interval was read from a file
RhoInterval = namedtuple('RhoInterval', ['chrom', 'start', 'end', 'rho', 'source'], defaults=[None])


def format_interval(interval):
    return f'{interval.chrom}:{interval.start}-{interval.end}'


def parse_rho(text):
    text = text.strip()
    if text in MISSING_TOKENS:
        return MISSING
    rho = float(text)
    if np.isnan(rho):
        return MISSING
    return rho


def iter_rho_intervals(rho_path):
    for line_number, line, columns in iter_records(rho_path, RHO_COLUMN + 1):
        chrom = columns[0].strip()
        if not chrom:
            raise ParseError(rho_path, line_number, line, 'empty reference name')
        try:
            start = int(columns[1])
            end = int(columns[2])
        except ValueError:
            raise ParseError(rho_path, line_number, line, 'start and end must be integers')
        if end <= start:
            raise ParseError(rho_path, line_number, line, 'interval end must be greater than its start')
        try:
            rho = parse_rho(columns[RHO_COLUMN])
        except ValueError:
            raise ParseError(rho_path, line_number, line, f'rho value {columns[RHO_COLUMN]!r} is not a number')
        if rho == 0:
            raise ParseError(rho_path, line_number, line, 'rho value is zero')
        yield RhoInterval(chrom, start, end, rho, (rho_path, line_number, line))


class RhoPartition:
    """Gap filled intervals of every reference, one flat sequence.

    Interval i is [starts[i], ends[i]) on chroms[i] with rate rhos[i] (NaN when
    missing). The intervals of one reference are contiguous, start at 1 and
    end at the reference length.
    """

    def __init__(self, chroms, starts, ends, rhos):
        self.chroms = np.asarray(chroms, dtype=object)
        self.starts = np.asarray(starts, dtype=np.int64)
        self.ends = np.asarray(ends, dtype=np.int64)
        self.rhos = np.asarray(rhos, dtype=float)
        for values in (self.chroms, self.starts, self.ends, self.rhos):
            values.flags.writeable = False

    def __len__(self):
        return len(self.starts)

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __getitem__(self, i):
        return RhoInterval(self.chroms[i], int(self.starts[i]), int(self.ends[i]), float(self.rhos[i]))

    def reference_span(self, chrom):
        return [self[i] for i in np.flatnonzero(self.chroms == chrom)]

    def to_frame(self):
        return pd.DataFrame({'chrom': self.chroms, 'start': self.starts, 'end': self.ends, 'rho': self.rhos})


def build_partition(intervals, reference_lengths):
    chroms, starts, ends, rhos = [], [], [], []

    def add(chrom, start, end, rho):
        chroms.append(chrom)
        starts.append(start)
        ends.append(end)
        rhos.append(rho)

    def close_reference(chrom, end):
        # trailing gap up to the reference length
        if end < reference_lengths[chrom]:
            add(chrom, end, reference_lengths[chrom], MISSING)

    current_chrom = None
    current_pos = 1
    for interval in intervals:
        if interval.chrom != current_chrom:
            if current_chrom is not None:
                close_reference(current_chrom, current_pos)
            if interval.chrom not in reference_lengths:
                raise UnknownReferenceError(interval.chrom, interval.source)
            current_chrom = interval.chrom
            current_pos = 1
        if interval.start < current_pos:
            reason = f'interval starts at {interval.start}, before position {current_pos} already covered on {current_chrom}'
            raise ParseError(*(interval.source or ('<intervals>', 0, format_interval(interval))), reason)
        if interval.start != current_pos:
            add(current_chrom, current_pos, interval.start, MISSING)
        if interval.end > reference_lengths[current_chrom]:
            print(f'WARNING: interval {format_interval(interval)} ends after the reference length '
                  f'{reference_lengths[current_chrom]}', file=sys.stderr)
        add(current_chrom, interval.start, interval.end, interval.rho)
        current_pos = interval.end
    if current_chrom is not None:
        close_reference(current_chrom, current_pos)

    # references without any rho interval are missing over their whole length
    seen = set(chroms)
    for chrom, length in reference_lengths.items():
        if chrom not in seen and length > 1:
            add(chrom, 1, length, MISSING)

    return RhoPartition(chroms, starts, ends, rhos)

import pytest

from rho_between_snps.reference_index import build_reference_index
from rho_between_snps.rho_partition import MISSING, RhoInterval, build_partition


@pytest.fixture
def write_table(tmp_path):
    def write(name, rows):
        path = tmp_path / name
        path.write_text(''.join('\t'.join(str(x) for x in row) + '\n' for row in rows))
        return path
    return write


@pytest.fixture
def write_rho(write_table):
    # rho is the 7th column, columns 4-6 are placeholders
    def write(name, rows):
        return write_table(name, [[chrom, start, end, '.', '.', '.', rho] for chrom, start, end, rho in rows])
    return write


@pytest.fixture
def chr1_partition():
    lengths = {'chr1': 1000}
    intervals = [RhoInterval('chr1', 100, 200, 0.5), RhoInterval('chr1', 200, 300, 0.8)]
    partition = build_partition(intervals, lengths)
    return partition, build_reference_index(partition), lengths


@pytest.fixture
def gapped_partition():
    lengths = {'chr1': 30}
    intervals = [RhoInterval('chr1', 1, 10, 2.5), RhoInterval('chr1', 10, 20, MISSING), RhoInterval('chr1', 20, 30, 1.0)]
    partition = build_partition(intervals, lengths)
    return partition, build_reference_index(partition)

import io

import pytest

from rho_between_snps.errors import OutOfOrderError, ParseError, UnknownReferenceError
from rho_between_snps.marker_pairs import Marker, RhoPair, iter_markers, run_marker_pairs, write_rho_pairs
from rho_between_snps.range_rho import is_missing
from rho_between_snps.reference_index import build_reference_index
from rho_between_snps.rho_partition import RhoInterval, build_partition


def run(chr1_partition, markers):
    partition, index, lengths = chr1_partition
    return list(run_marker_pairs(markers, partition, index, lengths))


def test_pairs_follow_the_markers(chr1_partition):
    pairs = run(chr1_partition, [Marker('chr1', 150), Marker('chr1', 250), Marker('chr1', 900)])
    assert [(p.chrom, p.start, p.end) for p in pairs] == [('chr1', 1, 150), ('chr1', 150, 250), ('chr1', 250, 900)]
    assert is_missing(pairs[0].rho)
    assert pairs[1].rho == pytest.approx(0.65)
    assert is_missing(pairs[2].rho)


def test_first_marker_of_each_reference_starts_at_one():
    lengths = {'chr1': 100, 'chr2': 100}
    partition = build_partition([RhoInterval('chr1', 1, 100, 1.0), RhoInterval('chr2', 1, 100, 3.0)], lengths)
    index = build_reference_index(partition)
    markers = [Marker('chr1', 10), Marker('chr1', 20), Marker('chr2', 5)]
    pairs = list(run_marker_pairs(markers, partition, index, lengths))
    assert pairs == [RhoPair('chr1', 1, 10, 1.0), RhoPair('chr1', 10, 20, 1.0), RhoPair('chr2', 1, 5, 3.0)]


def test_unknown_reference(chr1_partition):
    with pytest.raises(UnknownReferenceError, match='chr9'):
        run(chr1_partition, [Marker('chr9', 10)])


def test_positions_must_increase(chr1_partition):
    with pytest.raises(OutOfOrderError):
        run(chr1_partition, [Marker('chr1', 150), Marker('chr1', 150)])
    with pytest.raises(OutOfOrderError):
        run(chr1_partition, [Marker('chr1', 150), Marker('chr1', 120)])


def test_marker_on_the_first_base(chr1_partition):
    with pytest.raises(OutOfOrderError):
        run(chr1_partition, [Marker('chr1', 1)])


def test_pairs_before_an_error_are_emitted(chr1_partition):
    partition, index, lengths = chr1_partition
    pairs = run_marker_pairs([Marker('chr1', 150), Marker('chr1', 100)], partition, index, lengths)
    assert next(pairs).end == 150
    with pytest.raises(OutOfOrderError):
        next(pairs)


def test_reads_markers(write_table):
    path = write_table('snps.txt', [['CHR', 'POS', 'REF'], ['chr1', 150, 'A'], ['chr1', 250, 'G']])
    markers = list(iter_markers(path))
    assert [(m.chrom, m.pos) for m in markers] == [('chr1', 150), ('chr1', 250)]
    assert markers[1].source[1] == 3


def test_out_of_order_cites_the_line(write_table, chr1_partition):
    path = write_table('snps.txt', [['chr1', 250], ['chr1', 150]])
    with pytest.raises(OutOfOrderError, match='line 2'):
        run(chr1_partition, iter_markers(path))


def test_malformed_marker(write_table):
    path = write_table('snps.txt', [['chr1', 150], ['chr1', '2k']])
    with pytest.raises(ParseError, match='integer'):
        list(iter_markers(path))


def test_write_rho_pairs():
    out = io.StringIO()
    n = write_rho_pairs([RhoPair('chr1', 1, 150, float('nan')), RhoPair('chr1', 150, 250, 0.65)], out)
    assert n == 2
    assert out.getvalue() == 'chr1\t1\t150\tNA\nchr1\t150\t250\t0.65\n'


def test_malformed_first_marker_is_not_taken_for_a_header(write_table):
    path = write_table('snps.txt', [['chr1', '15O'], ['chr1', 250]])
    with pytest.raises(ParseError, match='integer') as excinfo:
        list(iter_markers(path))
    assert excinfo.value.line_number == 1

import argparse
import sys

from rho_between_snps.errors import RhoError
from rho_between_snps.fai_lengths import load_reference_lengths
from rho_between_snps.marker_pairs import iter_markers, run_marker_pairs, write_rho_pairs
from rho_between_snps.reference_index import build_reference_index
from rho_between_snps.rho_partition import build_partition, iter_rho_intervals


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Length weighted mean recombination rate (rho) between consecutive SNPs.')
    parser.add_argument('--rhofile', required=True, help='Rho intervals: chrom, start, end, ..., rho or NA in column 7.')
    parser.add_argument('--faifile', required=True, help='Reference lengths (.fai): chrom, length, ...')
    parser.add_argument('--snpfile', required=True, help='SNP positions: chrom, position, ... sorted by chrom then position.')
    parser.add_argument('--output', help='Output table (default: standard output).')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        reference_lengths = load_reference_lengths(args.faifile)
        partition = build_partition(iter_rho_intervals(args.rhofile), reference_lengths)
        index = build_reference_index(partition)
        pairs = run_marker_pairs(iter_markers(args.snpfile), partition, index, reference_lengths)
        if args.output:
            with open(args.output, 'w') as out:
                n_pairs = write_rho_pairs(pairs, out)
        else:
            n_pairs = write_rho_pairs(pairs, sys.stdout)
    except (RhoError, OSError) as e:
        sys.exit(f'ERROR: {e}')

    print(f'{len(partition)} rho intervals on {len(index)} references', file=sys.stderr)
    print(f'{n_pairs} SNP pairs saved to {args.output or "standard output"}', file=sys.stderr)


if __name__ == '__main__':
    main()

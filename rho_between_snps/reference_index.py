from types import MappingProxyType

from rho_between_snps.errors import DuplicateReferenceError


def build_reference_index(partition):
    # reference name -> position of its first interval in the partition
    first_interval = {}
    previous = None
    for i, chrom in enumerate(partition.chroms):
        if chrom == previous:
            continue
        # a reference must not come back once the partition moved past it
        if chrom in first_interval:
            raise DuplicateReferenceError(chrom, i)
        first_interval[chrom] = i
        previous = chrom
    return MappingProxyType(first_interval)

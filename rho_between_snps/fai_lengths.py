import pandas as pd

from rho_between_snps.errors import RhoError


def load_reference_lengths(fai_path):
    # name<TAB>length, further .fai columns are ignored
    try:
        fai = pd.read_csv(fai_path, sep='\t', header=None, usecols=[0, 1], names=['chrom', 'length'],
                          dtype={'chrom': str, 'length': 'int64'}, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, ValueError) as e:
        raise RhoError(f'{fai_path}: cannot read reference lengths ({e})') from e
    if (fai['length'] <= 0).any():
        bad = fai.loc[fai['length'] <= 0, 'chrom'].iloc[0]
        raise RhoError(f'{fai_path}: reference {bad} has a non-positive length')
    # duplicated names: the last line wins
    return {chrom: int(length) for chrom, length in zip(fai['chrom'], fai['length'])}

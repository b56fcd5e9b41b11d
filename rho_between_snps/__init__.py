"""Length-weighted recombination rate (rho) between consecutive SNP markers."""

__version__ = "0.1.0"

from dataclasses import dataclass

# ======== PARÁMETROS ========
MODULUS = 2**31

# Reference generators
A1 = 564853681
C1 = 790941697
A2 = 10449689
C2 = 176234371
TABLE_SIZE = 64

# Sample and test settings
SAMPLE_SIZE = 10000
TOLERANCE = 0.02
ALPHA = 0.05
CHI2_BINS = 20
CHECKPOINTS = (1, 15, 1000)


@dataclass(frozen=True)
class RunConfig:
    """Parameters for one demonstration run."""

    seed1: int = A1
    constant1: int = C1
    seed2: int = A2
    constant2: int = C2
    table_size: int = TABLE_SIZE
    sample_size: int = SAMPLE_SIZE
    tolerance: float = TOLERANCE
    alpha: float = ALPHA
    bins: int = CHI2_BINS
    checkpoints: tuple = CHECKPOINTS

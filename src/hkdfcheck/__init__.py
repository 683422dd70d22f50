from .errors import HarnessError
from .policy import Policy
from .report import Reporter
from .runner import VectorRunner
from .vectors import FILE_HASH_ALGORITHMS, load_corpus

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "FILE_HASH_ALGORITHMS",
    "HarnessError",
    "Policy",
    "Reporter",
    "VectorRunner",
    "load_corpus",
]

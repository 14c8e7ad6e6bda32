"""ReadBench -- raw vs. buffered TCP read micro-benchmark.

Run the two roles in separate terminals::

    python -m readbench server
    python -m readbench client

Or drive them from code with an injected config::

    from readbench import BenchConfig, measure

    result = measure(BenchConfig(port=4000, total_bytes=1000), buffered=True)
    print(result.bytes_received, result.elapsed)
"""

from .client import measure, run_client
from .config import BenchConfig
from .drain import drain
from .errors import BenchBindError, BenchConnectionError, BenchError, DrainError
from .payload import generate_payload
from .server import BenchServer, run_server, serve
from .types import DrainResult, DrainState, ReadInto, TimingSample

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "BenchConfig",
    "BenchServer",
    "serve",
    "run_server",
    "run_client",
    "measure",
    "drain",
    "generate_payload",
    "DrainResult",
    "DrainState",
    "ReadInto",
    "TimingSample",
    "BenchError",
    "BenchConnectionError",
    "BenchBindError",
    "DrainError",
]

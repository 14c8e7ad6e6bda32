# =============================================================================
# ReadBench -- Constants
# =============================================================================

# -- Address -------------------------------------------------------------------

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3333
DEFAULT_BACKLOG = 100

# -- Payload -------------------------------------------------------------------

TOTAL_BYTES = 1_000_000
PAYLOAD_MODULUS = 255  # not 256: value 255 never appears on the wire

# -- Drain ---------------------------------------------------------------------

READ_WINDOW = 1  # bytes requested per read call

# -- Labels --------------------------------------------------------------------

RAW_LABEL = "raw read"
BUFFERED_LABEL = "buffered read"

# -- Roles ---------------------------------------------------------------------

ROLE_CLIENT = "client"
ROLE_SERVER = "server"

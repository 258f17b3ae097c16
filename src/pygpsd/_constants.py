"""Internal constants shared across the library."""

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 2947

# Sent verbatim, without a trailing terminator.
WATCH_COMMAND = b'?WATCH={"enable":true,"json":true}'

DEFAULT_QUEUE_SIZE = 100
DEFAULT_READ_CHUNK_SIZE = 4096
DEFAULT_MAX_FRAME_SIZE = 1024 * 1024

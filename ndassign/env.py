import os

DEBUG = int(os.getenv("DEBUG", "0"))
CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", str(2**16)))  # linear indices per transfer chunk

assert CHUNK_SIZE > 0, f"CHUNK_SIZE must be positive, got {CHUNK_SIZE}"

import os

TOP_K: int = 5

# Catalogue file decoding; undecodable bytes are dropped
ENCODING: str = "utf-8"

# Optional truncation of term text at load time (None = keep full text)
MAX_TERM_CHARS: int | None = None

# /* ~~~ scan the catalogue for sort-order violations after loading ~~~ */
CHECK_SORTED: bool = False

# Progress logging (set TERMCOMPLETE_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("TERMCOMPLETE_VERBOSE") == "1"
PROGRESS_EVERY_LINES: int = 100_000

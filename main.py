import sys
from typing import Optional, Sequence

from src.core.selection import (
    QUOTE_MAX,
    QUOTE_MIN,
    SizeFilter,
    EmptySelectionError,
    filter_quotes,
    select_quote,
)
from src.core.runner import main as run_main
from src.storage import database


def main(argv: Optional[Sequence[str]] = None) -> None:
    # The bundled fortunes file is installed beside the storage module,
    # not in the current directory.
    sys.exit(run_main(argv, program_path=database.__file__))


if __name__ == "__main__":
    main()

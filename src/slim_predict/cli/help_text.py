"""Static help texts for ``slim_predict``.

Both texts go to stdout with plain ``print``: they contain square
brackets that Rich would read as markup, and they must work without
Rich installed.
"""

from __future__ import annotations

import sys
from typing import TextIO

from slim_predict.core.options import PROG

USAGE_LINE: str = f"{PROG} [options] model-file old-file [test-file]"

LONG_HELP: tuple[str, ...] = (
    " ",
    " Usage:",
    f"   {USAGE_LINE}",
    " ",
    " Parameters:",
    "   model-file",
    "       The file that stores the model that was generated by slim_learn.",
    " ",
    "   old-file",
    "       The file that stores the historical information for each user.",
    " ",
    "   test-file",
    "       The file that stores the hidden items for each user.",
    " ",
    " Options:",
    "   -ifmt=string",
    "      Specifies the format of the input files. Available options are:",
    "        csr     -  CSR format [default].",
    "        csrnv   -  CSR format without ratings.",
    "        cluto   -  Format used by CLUTO.",
    "        ijv     -  One (row#, col#, val) per line.",
    " ",
    "   -binarize",
    "      Specifies that the ratings should be binarized.",
    " ",
    "   -outfile=string",
    "      Specifies the output file that will store the predictions.",
    "      If not specified, no output will be produced.",
    " ",
    "   -nrcmds=int",
    "      Specifies the number of items to recommend for each user.",
    "      The default value is 10.",
    " ",
    "   -dbglvl=int",
    "      Specifies the debug level. The default value is 0.",
    " ",
    "   -version",
    "      Prints the program version.",
    " ",
    "   -help",
    "      Prints this message.",
    " ",
)

SHORT_HELP: tuple[str, ...] = (
    " ",
    f" Usage: {USAGE_LINE}",
    f"   use '{PROG} -help' for a summary of the options.",
)


def _emit(lines: tuple[str, ...], stream: TextIO | None) -> None:
    out = stream if stream is not None else sys.stdout
    for line in lines:
        print(line, file=out)


def print_long_help(stream: TextIO | None = None) -> None:
    """Print the full option reference."""
    _emit(LONG_HELP, stream)


def print_short_help(stream: TextIO | None = None) -> None:
    """Print the one-line usage reminder."""
    _emit(SHORT_HELP, stream)

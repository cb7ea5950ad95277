import glob
import logging
from pathlib import Path

from tqdm import tqdm

# Reading and tokenizing plain-text corpora: one training sequence per line.

logger = logging.getLogger(__name__)


def read_lines(path):
    """Lazily yields the lines of a UTF-8 text file, without line endings."""
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            yield line.rstrip('\r\n')


def tokenize(line):
    """Splits a line on any whitespace, dropping empty fragments."""
    return line.split()


def expand_paths(patterns):
    """
    Expands glob patterns into a sorted list of file paths.
    Patterns that match nothing are kept as literal paths so that
    reading them later raises FileNotFoundError.
    """
    paths = []
    for pattern in patterns:
        matches = sorted(glob.glob(str(pattern)))
        if matches:
            paths.extend(Path(m) for m in matches)
        else:
            paths.append(Path(pattern))
    return paths


def iter_sequences(paths, progress=True):
    """Yields the token list of every non-empty line across the given files."""
    for path in tqdm(paths, desc="Reading corpus", unit="file", disable=not progress):
        count = 0
        for line in read_lines(path):
            tokens = tokenize(line)
            if tokens:
                count += 1
                yield tokens
        logger.debug(f"Read {count} sequences from {path}")

import argparse
import logging
import sys
from concurrent.futures import ProcessPoolExecutor

from tqdm import tqdm

from .. import config
from ..corpus import expand_paths, iter_sequences
from .persistence import save
from .words import WordChain


def _train_chunk(paths, order):
    """Builds a chain from a chunk of corpus files, in a worker process."""
    chain = WordChain(order=order)
    for tokens in iter_sequences(paths, progress=False):
        chain.feed(tokens)
    return chain


def build_chain(paths, order=1, workers=1):
    """
    Builds a WordChain from corpus files, one sentence per line.
    With more than one worker, files are split into chunks, each chunk is
    trained in its own process and the partial chains are merged.
    """
    paths = list(paths)
    if workers <= 1 or len(paths) <= 1:
        chain = WordChain(order=order)
        for tokens in iter_sequences(paths):
            chain.feed(tokens)
        return chain

    chunk_size = max(1, -(-len(paths) // workers))
    chunks = [paths[i:i + chunk_size] for i in range(0, len(paths), chunk_size)]
    logging.info(f"Training {len(chunks)} chunks using {workers} workers...")

    chain = WordChain(order=order)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_train_chunk, chunk, order) for chunk in chunks]
        # Merge in submission order so slot order matches a sequential build
        for future in tqdm(futures, total=len(futures), desc="Merging chunks"):
            chain.merge(future.result())
    return chain


def main(argv=None):
    parser = argparse.ArgumentParser(description="Train a Markov chain on plain-text corpus files.")
    parser.add_argument('--corpus', nargs='+', default=[str(config.DEFAULT_CORPUS_PATH)],
                        help="Paths/globs to corpus files, one sentence per line.")
    parser.add_argument('--order', type=int, default=config.DEFAULT_ORDER,
                        help=f"Order of the Markov chain (default: {config.DEFAULT_ORDER}).")
    parser.add_argument('--workers', type=int, default=config.DEFAULT_WORKERS,
                        help="Number of worker processes used to read the corpus.")
    parser.add_argument('--output', default=config.DEFAULT_MODEL_PATH,
                        help="Output file for the trained model.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    paths = expand_paths(args.corpus)
    missing = [p for p in paths if not p.is_file()]
    if missing:
        for p in missing:
            logging.error(f"Corpus file not found: {p}")
        return 1

    try:
        chain = build_chain(paths, order=args.order, workers=args.workers)
    except ValueError as e:
        logging.error(f"Could not train the chain: {e}")
        return 1

    if chain.is_empty():
        logging.warning("The corpus contained no sentences; the saved model is empty.")

    save(chain, args.output)
    logging.info(f"Trained Markov chain of order {args.order} with {len(chain.map)} contexts.")
    logging.info(f"Model saved to {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

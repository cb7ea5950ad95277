import argparse
import logging
import random
import sys

from .. import config
from .persistence import load
from .words import WordChain


def generate_sentences(model, count=1, start=None, rng=None):
    """Generates `count` sentences, optionally starting with the given words."""
    if not start:
        return list(model.str_iter_for(count, rng))
    return [model.generate_str_from_tokens(start, rng) for _ in range(count)]


def _non_negative_int(value):
    count = int(value)
    if count < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {count}")
    return count


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate sentences using a trained Markov chain model.")
    parser.add_argument('--model', default=config.DEFAULT_MODEL_PATH,
                        help='Path to the trained model (pickle file)')
    parser.add_argument('--count', type=_non_negative_int, default=config.DEFAULT_COUNT, help='Number of sentences to generate')
    parser.add_argument('--start', nargs='+', default=None, help='Optional words the sentences must start with')
    parser.add_argument('--seed', type=int, default=None, help='Seed for reproducible output')
    parser.add_argument('--output', default=None,
                        help='Output file to save the generated sentences (prints to stdout if not set)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    try:
        model = load(args.model)
    except FileNotFoundError:
        logging.error(f"Model file not found: {args.model}")
        return 1
    except ValueError as e:
        logging.error(f"Could not load model from {args.model}: {e}")
        return 1
    if not isinstance(model, WordChain):
        logging.error(f"Model at {args.model} is not a word chain")
        return 1

    rng = random.Random(args.seed)
    sentences = generate_sentences(model, count=args.count, start=args.start, rng=rng)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as out_f:
            for sentence in sentences:
                out_f.write(f"{sentence}\n")
        logging.info(f"Wrote {len(sentences)} sentences to {args.output}")
    else:
        for sentence in sentences:
            print(sentence)
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
A command-line tool that feeds text files into a word chain and prints
randomly generated sentences.

Each line of each file is treated as one sentence.
"""
import logging
import random
from pathlib import Path

import click

from . import config
from .markov_chain import WordChain
from .markov_chain.graph import to_dot


@click.command()
@click.argument('files', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--order', '-o', type=click.IntRange(min=1), default=config.DEFAULT_ORDER, show_default=True,
              help="Order of the Markov chain.")
@click.option('--count', '-c', type=click.IntRange(min=0), default=config.DEFAULT_COUNT, show_default=True,
              help="Number of sentences to generate.")
@click.option('--seed', type=int, default=None, help="Seed for reproducible output.")
@click.option('--dot', is_flag=True, help="Print the chain as a Graphviz DOT graph instead.")
def main(files, order, count, seed, dot):
    """Generates sentences from the text in FILES."""
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    chain = WordChain(order=order)
    for path in files:
        try:
            chain.feed_file(path)
        except UnicodeDecodeError as e:
            click.secho(f"Error reading {path}: not valid UTF-8 text ({e})", fg='red', err=True)
            raise SystemExit(1)
    logging.debug(f"Fed {len(files)} files into {chain!r}")

    if dot:
        click.echo(to_dot(chain))
        return

    if chain.is_empty():
        click.secho("The given files contain no text.", fg='red', err=True)
        raise SystemExit(1)

    for sentence in chain.str_iter_for(count, random.Random(seed)):
        click.echo(sentence)


if __name__ == '__main__':
    main()

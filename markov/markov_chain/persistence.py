import logging
import pickle
from pathlib import Path

from .markov_chain import Chain

logger = logging.getLogger(__name__)


def dumps(chain):
    """Serializes a chain to bytes."""
    return pickle.dumps(chain, protocol=pickle.HIGHEST_PROTOCOL)


def loads(data):
    """
    Reconstructs a chain from bytes produced by dumps().
    Raises ValueError if the data is malformed or does not hold a Chain.
    Only load models from sources you trust: this is pickle.
    """
    try:
        chain = pickle.loads(data)
    except (pickle.UnpicklingError, EOFError, AttributeError, ImportError, IndexError, KeyError, TypeError) as e:
        raise ValueError(f"Malformed model data: {e}") from e
    if not isinstance(chain, Chain):
        raise ValueError(f"Loaded object is not a Chain instance (got {type(chain).__name__})")
    return chain


def save(chain, path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'wb') as f:
        f.write(dumps(chain))
    logger.debug(f"Saved {chain!r} to {path}")


def load(path):
    with open(path, 'rb') as f:
        chain = loads(f.read())
    logger.debug(f"Loaded {chain!r} from {path}")
    return chain

from .iterators import InfiniteChainIterator, SizedChainIterator
from .markov_chain import SENTINEL, Chain, Distribution
from .words import WordChain

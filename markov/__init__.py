from .markov_chain import SENTINEL, Chain, Distribution, WordChain

__all__ = ['SENTINEL', 'Chain', 'Distribution', 'WordChain']

"""Trust Game: iterated Prisoner's Dilemma with reputation-weighted governance."""

__version__ = "0.1.0"

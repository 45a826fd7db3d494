"""MovieMuse — retrieval-augmented chat over the IMDB top 100 movies."""

__version__ = "0.1.0"

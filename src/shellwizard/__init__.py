"""shellwizard — ask a language model about your terminal from your terminal."""

__version__ = "0.1.0"

"""TaxChat — a chat front-end relaying single messages to a hosted LLM."""

__version__ = "1.0.0"

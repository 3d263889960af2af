from .posterior import posterior, sequential_posterior

__all__ = ['posterior', 'sequential_posterior']

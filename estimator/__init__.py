"""Financial estimating core for landscaping and hardscape contractors."""

__version__ = "1.0.0"
